"""Admin-managed product records."""

import re
from datetime import UTC, datetime
from typing import ClassVar, Literal

import pydantic
from pydantic import Field, computed_field

from shared.exceptions import ValidationError
from shared.model import DomainModel, as_validation_error
from shared.money import format_currency


class CustomizationOption(DomainModel):
    id: str
    label: str
    price_adjustment: int = 0


class CustomizationGroup(DomainModel):
    id: str
    name: str
    type: Literal["single", "multiple"] = "single"
    required: bool = False
    helper_text: str | None = None
    options: list[CustomizationOption] = Field(default_factory=list)


class ProductRecord(DomainModel):
    identity_field: ClassVar[str] = "id"

    id: str
    name: str
    category: str | None = None
    price: int
    description: str = ""
    sku: str = ""
    image_url: str = ""
    highlight: str = ""
    is_available: bool = True
    is_featured: bool = False
    sold_out: bool = False
    hot_option: bool = False
    iced_option: bool = False
    prep_time: str = ""
    calories: str = ""
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    customizations: list[CustomizationGroup] = Field(default_factory=list)

    @computed_field
    @property
    def price_label(self) -> str:
        return format_currency(self.price)

    @property
    def is_orderable(self) -> bool:
        return self.is_available and not self.sold_out

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, id=None, name=None, price=None, **details):
        """Validate the required fields and build a record.

        ``price`` must be an actual number; numeric strings are rejected.
        """
        if not id or not name or isinstance(price, bool) or not isinstance(price, int | float):
            raise ValidationError({"product": ["id, name, price wajib diisi"]})
        if price < 0:
            raise ValidationError({"price": ["Harga tidak boleh negatif"]})
        category = details.pop("category", None)
        try:
            return cls(
                id=str(id).strip(),
                name=str(name).strip(),
                price=round(price),
                category=slugify_category_name(category) if category else None,
                **details,
            )
        except pydantic.ValidationError as exc:
            raise as_validation_error(exc) from exc

    def update(self, **changes) -> None:
        if "price" in changes:
            price = changes["price"]
            if isinstance(price, bool) or not isinstance(price, int | float) or price < 0:
                raise ValidationError({"price": ["Harga harus berupa angka"]})
            changes["price"] = round(price)
        if "name" in changes and not str(changes["name"] or "").strip():
            raise ValidationError({"name": ["Nama produk wajib diisi"]})
        if changes.get("category"):
            changes["category"] = slugify_category_name(changes["category"])
        for field, value in changes.items():
            if field in ("id", "created_at") or field not in type(self).model_fields:
                continue
            try:
                setattr(self, field, value)
            except pydantic.ValidationError as exc:
                raise as_validation_error(exc) from exc


def slugify_category_name(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", (name or "").lower().strip()).strip("-")
