from .company_record import CompanyRecord
from .company_stats import CompanyStats
from .progress import ExtractionProgress
from .scrape_config import ScrapeConfig

__all__ = [
    "CompanyRecord",
    "CompanyStats",
    "ExtractionProgress",
    "ScrapeConfig",
]
