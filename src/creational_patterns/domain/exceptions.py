"""Domain-specific exceptions."""

from collections.abc import Iterable


class DomainError(Exception):
    """Base exception for domain errors."""

    pass


class UnsupportedSelection(DomainError, ValueError):
    """Raised when a discriminator does not name any known creator."""

    def __init__(self, value: str, kind: str, choices: Iterable[str]) -> None:
        self.value = value
        self.kind = kind
        self.choices = tuple(choices)
        super().__init__(
            f"{kind} '{value}' is not supported. Expected one of: {', '.join(self.choices)}."
        )
