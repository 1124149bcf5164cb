"""Pydantic request/response schemas for the Menu API."""

from pydantic import Field

from menu.product.catalog import Product
from menu.product.options import CartOptionSelection, OptionGroup
from shared.api import CamelModel


class ProductDetailResponse(CamelModel):
    product: Product
    category: str
    category_title: str
    option_groups: list[OptionGroup]


class ResolveSelectionRequest(CamelModel):
    singles: dict[str, str] = Field(default_factory=dict)
    multiples: dict[str, list[str]] = Field(default_factory=dict)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "singles": {"size": "large", "ice": "less-ice"},
                    "multiples": {"addons": ["boba"]},
                }
            ]
        }
    }


class ResolveSelectionResponse(CamelModel):
    options: list[CartOptionSelection]
    add_on_total: int
