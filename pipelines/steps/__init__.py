# Namespace for pipeline steps
from .fetch_page import FetchPage, WaitForContent  # noqa: F401
from .extract_companies import ExtractCompanies  # noqa: F401
from .merge_companies import MergeCompanies  # noqa: F401
from .persist_snapshot import PersistSnapshot, AdvancePage  # noqa: F401
