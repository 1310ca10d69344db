"""In-memory product catalogue."""

import logging
from typing import Any, Iterable, Iterator, Mapping

from pydantic import ValidationError

from .errors import BadBatch, BadSearch
from .model import (
    Batch,
    ByKeyword,
    ByPrice,
    Product,
    ReorderResult,
    SearchResult,
    parse_criteria,
)

logger = logging.getLogger(__name__)


class Catalogue:
    """An ordered collection of products with unique ids."""

    def __init__(self, title: str):
        self._title = title
        self._products: list[Product] = []

    @property
    def title(self) -> str:
        return self._title

    @property
    def products(self) -> tuple[Product, ...]:
        """Snapshot of the stored products in insertion order."""
        return tuple(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self.products)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Product):
            item = item.id
        if not isinstance(item, str):
            return False
        return self.find_product_by_id(item) is not None

    def __repr__(self) -> str:
        return f"Catalogue(title={self._title!r}, products={len(self._products)})"

    def find_product_by_id(self, product_id: str) -> Product | None:
        """Return the product with the given id, or None."""
        return next((p for p in self._products if p.id == product_id), None)

    def add_product(self, product: Product) -> bool:
        """Append a product unless its id is already taken.

        Returns False, leaving the catalogue unchanged, for a duplicate id.
        """
        if self.find_product_by_id(product.id) is not None:
            logger.debug(f"Rejected duplicate product id {product.id} in {self._title}")
            return False

        self._products.append(product)
        logger.debug(f"Added product {product.id} to {self._title}")
        return True

    def remove_product_by_id(self, product_id: str) -> Product | None:
        """Remove and return the product with the given id, or None if absent."""
        removed = self.find_product_by_id(product_id)
        if removed is None:
            return None

        self._products = [p for p in self._products if p.id != product_id]
        logger.debug(f"Removed product {product_id} from {self._title}")
        return removed

    def check_reorders(self) -> ReorderResult:
        """Ids of products whose stock is at or below their reorder level."""
        return ReorderResult(
            product_ids=[p.id for p in self._products if p.needs_reorder]
        )

    def batch_add_products(
        self, batch: Batch | Mapping[str, Any] | Iterable[Product]
    ) -> int:
        """Add a batch of products, all or nothing.

        ``batch`` is a Batch, a mapping shaped like one, or an iterable of
        products. Every candidate is checked against the current catalogue
        before anything is added; a single clash raises BadBatch and nothing
        is stored. Candidates with no stock are skipped. Returns the number
        of products added.
        """
        if isinstance(batch, Mapping):
            batch = Batch.model_validate(batch)
        candidates = list(batch.products if isinstance(batch, Batch) else batch)

        clashing = [
            p.id for p in candidates if self.find_product_by_id(p.id) is not None
        ]
        if clashing:
            logger.warning(
                f"Rejected batch of {len(candidates)} for {self._title}: "
                f"clashing ids {clashing}"
            )
            raise BadBatch(clashing)

        added = sum(1 for p in candidates if p.in_stock and self.add_product(p))
        logger.info(
            f"Added {added} of {len(candidates)} batch products to {self._title}"
        )
        return added

    def search(self, criteria: ByPrice | ByKeyword | Mapping[str, Any]) -> SearchResult:
        """Find product ids by maximum price or by name keyword.

        ``criteria`` is a ByPrice or ByKeyword, or a mapping with a ``price``
        or ``keyword`` key. A mapping with neither, or with values that do
        not validate, gives an empty result.
        """
        if isinstance(criteria, Mapping):
            try:
                parsed = parse_criteria(criteria)
            except ValidationError as e:
                logger.warning(f"Ignoring invalid search criteria {dict(criteria)}: {e}")
                return SearchResult()
            if parsed is None:
                logger.warning(
                    f"Search criteria has no price or keyword: {dict(criteria)}"
                )
                return SearchResult()
            criteria = parsed

        if isinstance(criteria, ByPrice):
            matches = [p.id for p in self._products if p.price <= criteria.max_price]
        elif isinstance(criteria, ByKeyword):
            matches = [p.id for p in self._products if criteria.keyword in p.name]
        else:
            raise BadSearch(f"Unsupported search criteria: {criteria!r}")

        logger.debug(f"Search {criteria!r} matched {len(matches)} products")
        return SearchResult(product_ids=matches)
