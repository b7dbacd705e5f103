"""Shared result and error types.

Validators return structured results and never raise; formatters and
extractors raise subclasses of :class:`MoroccoIdError`.  Every error carries
a machine-readable ``code``, a human-readable ``message`` and a ``details``
mapping with enough context (lengths, computed vs. provided checksums) to
diagnose the failure without reading the source.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class MoroccoIdError(Exception):
    """Base class for every error raised by this package.

    Attributes
    ----------
    code:
        Machine-readable error code (an ``Enum`` member with a ``str`` value).
    message:
        Human-readable explanation.
    details:
        Additional context about the failure.
    """

    def __init__(
        self,
        code: Enum,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details: dict[str, Any] = dict(details or {})
        super().__init__(f"[{code.value}] {message}")


@dataclass(frozen=True)
class ValidationFailure:
    """Why a validator rejected its input."""

    code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_error(cls, error: MoroccoIdError) -> "ValidationFailure":
        return cls(code=error.code.value, message=error.message, details=dict(error.details))
