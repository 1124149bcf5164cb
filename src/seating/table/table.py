"""Dine-in table aggregate."""

import re
from typing import ClassVar

from shared.exceptions import ValidationError
from shared.model import DomainModel

_TABLE_CODE_PATTERN = re.compile(r"^M-(\d+)$")


def format_table_code(number: int) -> str:
    return f"M-{str(number).zfill(2)}"


def format_table_name(number: int) -> str:
    return f"Meja {str(number).zfill(2)}"


def table_number(slug: str) -> int | None:
    match = _TABLE_CODE_PATTERN.match(slug or "")
    return int(match.group(1)) if match else None


def table_url(origin: str, slug: str) -> str:
    return f"{origin.rstrip('/')}/menu?cards={slug}"


class Table(DomainModel):
    identity_field: ClassVar[str] = "slug"

    slug: str
    name: str
    active: bool = True
    number: int | None = None
    url: str | None = None
    qr_data_url: str | None = None

    @classmethod
    def create(cls, slug=None, name=None, active=True, **details):
        if not slug or not name:
            raise ValidationError({"table": ["slug dan name wajib diisi"]})
        slug = str(slug)
        return cls(
            slug=slug,
            name=str(name),
            active=active is not False,
            number=details.get("number", table_number(slug)),
            url=details.get("url"),
            qr_data_url=details.get("qr_data_url"),
        )

    @classmethod
    def numbered(cls, number: int, origin: str, active: bool = True, qr_renderer=None):
        slug = format_table_code(number)
        url = table_url(origin, slug)
        return cls(
            slug=slug,
            name=format_table_name(number),
            active=active,
            number=number,
            url=url,
            qr_data_url=qr_renderer(url) if qr_renderer else None,
        )

    def merge(self, changes: dict) -> None:
        """Overlay changed fields; the slug of an existing table never changes.

        The merged record is validated as a whole before any field is written.
        """
        updates = {field: value for field, value in changes.items() if field != "slug" and field in type(self).model_fields}
        merged = type(self).model_validate({**self.model_dump(), **updates})
        for field in updates:
            setattr(self, field, getattr(merged, field))

    def toggle(self) -> None:
        self.active = not self.active
