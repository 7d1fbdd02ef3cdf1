"""Validation outcome value object.

ONLY validation outcome - the result of checking one file part:
accepted, rejected for its type, or rejected for its size.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OutcomeKind(str, Enum):
    """Kinds of validation outcome."""
    ACCEPTED = "accepted"
    REJECTED_INVALID_TYPE = "rejected_invalid_type"
    REJECTED_TOO_LARGE = "rejected_too_large"


@dataclass(frozen=True)
class ValidationOutcome:
    """Outcome of validating one file part."""

    kind: OutcomeKind
    filename: Optional[str] = None
    detail: Optional[str] = None

    @classmethod
    def accepted(cls, filename: Optional[str] = None) -> "ValidationOutcome":
        return cls(OutcomeKind.ACCEPTED, filename)

    @classmethod
    def rejected_invalid_type(cls, filename: str, detail: str) -> "ValidationOutcome":
        return cls(OutcomeKind.REJECTED_INVALID_TYPE, filename, detail)

    @classmethod
    def rejected_too_large(cls, filename: str, detail: str) -> "ValidationOutcome":
        return cls(OutcomeKind.REJECTED_TOO_LARGE, filename, detail)

    @property
    def is_accepted(self) -> bool:
        return self.kind is OutcomeKind.ACCEPTED
