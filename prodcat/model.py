from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Product(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    quantity_in_stock: int = Field(ge=0, alias="quantityInStock")
    reorder_level: int = Field(ge=0, alias="reorderLevel")
    price: float = Field(ge=0)

    @property
    def needs_reorder(self) -> bool:
        return self.quantity_in_stock <= self.reorder_level

    @property
    def in_stock(self) -> bool:
        return self.quantity_in_stock > 0


class Batch(BaseModel):
    type: Literal["Batch"] = "Batch"
    products: list[Product] = Field(default_factory=list)


class ByPrice(BaseModel):
    """Match products priced at or below ``max_price``."""

    kind: Literal["price"] = "price"
    max_price: float


class ByKeyword(BaseModel):
    """Match products whose name contains ``keyword`` (case-sensitive)."""

    kind: Literal["keyword"] = "keyword"
    keyword: str


SearchCriteria = Annotated[Union[ByPrice, ByKeyword], Field(discriminator="kind")]

_criteria_adapter = TypeAdapter(SearchCriteria)


def parse_criteria(raw: Mapping[str, Any]) -> ByPrice | ByKeyword | None:
    """Build search criteria from a loose ``{"price": ...}`` or ``{"keyword": ...}`` mapping.

    ``price`` wins when both keys are present. Returns None when neither is.
    A mapping carrying an explicit ``kind`` tag is validated as the tagged
    variant instead.
    """
    if "kind" in raw:
        return _criteria_adapter.validate_python(raw)
    if raw.get("price") is not None:
        return ByPrice(max_price=raw["price"])
    if raw.get("keyword") is not None:
        return ByKeyword(keyword=raw["keyword"])
    return None


class ReorderResult(BaseModel):
    type: Literal["Reorder"] = "Reorder"
    product_ids: list[str] = Field(default_factory=list)


class SearchResult(BaseModel):
    type: Literal["Search"] = "Search"
    product_ids: list[str] = Field(default_factory=list)
