"""
Discriminator-to-creator dispatch.

Every demo owns a static registry mapping a discriminator token to a
zero-argument constructor for its creator (a factory or a builder).
`select()` normalizes the raw console input, looks it up once, and returns a
`Selection`: either a freshly built creator or the `UnsupportedSelection`
error explaining why there is none. Deciding whether a failed selection is
fatal is left to the entry point.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Generic, TypeVar

from creational_patterns.domain.exceptions import UnsupportedSelection

logger = logging.getLogger(__name__)

T = TypeVar("T")


def normalize(raw: str | None) -> str:
    """Trim and lowercase a console token; a missing line becomes ""."""
    if raw is None:
        return ""
    return raw.strip().lower()


@dataclass(frozen=True)
class Selection(Generic[T]):
    """Outcome of a dispatch: exactly one of `creator` / `error` is set."""

    creator: T | None = None
    error: UnsupportedSelection | None = None

    def __post_init__(self) -> None:
        if (self.creator is None) == (self.error is None):
            raise ValueError("Selection needs exactly one of creator or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the creator, or raise the selection error."""
        if self.error is not None:
            raise self.error
        return self.creator


def select(raw: str | None, registry: Mapping[str, Callable[[], T]], kind: str) -> Selection[T]:
    token = normalize(raw)
    # Registries are keyed by str-Enums; compare on their values so the
    # normalized console token matches directly.
    constructors = {getattr(key, "value", key): ctor for key, ctor in registry.items()}
    constructor = constructors.get(token)
    if constructor is None:
        logger.warning("Rejected %s %r", kind.lower(), token)
        return Selection(error=UnsupportedSelection(token, kind, constructors))
    logger.info("Selected %s %r", kind.lower(), token)
    return Selection(creator=constructor())
