"""Data models shared by validator implementations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ValidationStatus(str, Enum):
    VALIDATION_SUCCESS = "VALIDATION_SUCCESS"
    VALIDATION_ERROR = "VALIDATION_ERROR"


class Severity(str, Enum):
    ERROR = "ERROR"
    INFO = "INFO"


@dataclass(frozen=True)
class ValidationMessage:
    """Single message reported by a validator."""

    severity: Severity
    message: str

    @classmethod
    def error(cls, message: str) -> "ValidationMessage":
        return cls(Severity.ERROR, message)

    @classmethod
    def info(cls, message: str) -> "ValidationMessage":
        return cls(Severity.INFO, message)


@dataclass
class ValidationResponse:
    """Outcome of validating a manifest."""

    status: ValidationStatus = ValidationStatus.VALIDATION_SUCCESS
    messages: List[ValidationMessage] = field(default_factory=list)

    def add(self, message: ValidationMessage) -> None:
        """Record a message; any error marks the response as failed."""
        self.messages.append(message)
        if message.severity == Severity.ERROR:
            self.status = ValidationStatus.VALIDATION_ERROR

    @property
    def success(self) -> bool:
        return self.status == ValidationStatus.VALIDATION_SUCCESS


@dataclass
class Manifest:
    """
    Base type for validator inputs.

    Concrete manifests are defined per submission type by the
    validator implementations.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    fields: Dict[str, Any] = field(default_factory=dict)
