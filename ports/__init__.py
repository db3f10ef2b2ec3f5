from .document import DocumentNode
from .fetcher import PageFetcherPort
from .source import DirectorySourcePort
from .store import BlobStorePort

__all__ = [
    "DocumentNode",
    "PageFetcherPort",
    "DirectorySourcePort",
    "BlobStorePort",
]
