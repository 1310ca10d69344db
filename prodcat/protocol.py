from typing import Any, Iterable, Mapping, runtime_checkable, Protocol

from .model import Batch, ByKeyword, ByPrice, Product, ReorderResult, SearchResult


@runtime_checkable
class ProductCatalogue(Protocol):
    @property
    def title(self) -> str: ...
    def find_product_by_id(self, product_id: str) -> Product | None: ...
    def add_product(self, product: Product) -> bool: ...
    def remove_product_by_id(self, product_id: str) -> Product | None: ...
    def check_reorders(self) -> ReorderResult: ...
    def batch_add_products(
        self, batch: Batch | Mapping[str, Any] | Iterable[Product]
    ) -> int: ...
    def search(
        self, criteria: ByPrice | ByKeyword | Mapping[str, Any]
    ) -> SearchResult: ...
