from .catalogue import Catalogue
from .errors import BadBatch, BadSearch, CatalogueError
from .model import (
    Batch,
    ByKeyword,
    ByPrice,
    Product,
    ReorderResult,
    SearchCriteria,
    SearchResult,
    parse_criteria,
)
from .protocol import ProductCatalogue

__all__ = [
    "Batch",
    "BadBatch",
    "BadSearch",
    "ByKeyword",
    "ByPrice",
    "Catalogue",
    "CatalogueError",
    "Product",
    "ProductCatalogue",
    "ReorderResult",
    "SearchCriteria",
    "SearchResult",
    "parse_criteria",
]
