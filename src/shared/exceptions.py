"""Error types shared by every SPM Café context.

Aggregates and services raise these; the HTTP layer translates them into
400/404 responses (see ``shared.api.register_exception_handlers``).
"""


class SpmCafeError(Exception):
    """Base class for domain errors."""


class ValidationError(SpmCafeError):
    """Input or invariant violation.

    ``messages`` maps a field name to the list of problems found for it, e.g.
    ``{"quantity": ["Quantity must be at least 1"]}``.
    """

    def __init__(self, messages: dict[str, list[str]]) -> None:
        self.messages = messages
        super().__init__(messages)

    @property
    def first_message(self) -> str:
        for problems in self.messages.values():
            if problems:
                return problems[0]
        return "Invalid request"


class ObjectNotFoundError(SpmCafeError):
    """No record exists for the requested identifier."""


class AuthenticationError(SpmCafeError):
    """Missing, unknown or expired staff session."""
