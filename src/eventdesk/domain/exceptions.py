from __future__ import annotations

from typing import Any, Literal

Stage = Literal["input", "output"]


class EventDeskError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(EventDeskError):
    """Payload does not match its declared schema.

    ``stage`` tells whether the caller's input or the provider's output was
    rejected; ``errors`` carries the per-field details.
    """

    def __init__(
        self,
        message: str,
        *,
        stage: Stage = "input",
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.stage = stage
        self.errors = errors or []
        super().__init__(message)


class ProviderError(EventDeskError):
    """Statistics provider failed to produce a result."""


class NotFoundError(ProviderError):
    """Requested resource does not exist."""
