"""Base class for aggregates and value objects.

Fields are snake_case in Python and camelCase on the wire.
"""

import pydantic
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from shared.exceptions import ValidationError


class DomainModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


def as_validation_error(exc: pydantic.ValidationError) -> ValidationError:
    """Translate a pydantic error into the domain's ``ValidationError``."""
    messages: dict[str, list[str]] = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())) or "value"
        messages.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return ValidationError(messages)
