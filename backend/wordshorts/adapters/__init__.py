# Adapters layer - Concrete implementations (vocabulary API, embedded catalog)

from .local_catalog import LocalCatalogAdapter
from .vocab_api import VocabApiAdapter

__all__ = [
    "LocalCatalogAdapter",
    "VocabApiAdapter",
]
