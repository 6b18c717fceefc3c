"""Convenience re-exports for sample retrieval data models."""

from .sample import Attribute, Sample
from .validation import (
    Manifest,
    Severity,
    ValidationMessage,
    ValidationResponse,
    ValidationStatus,
)

__all__ = [
    "Attribute",
    "Sample",
    "Manifest",
    "Severity",
    "ValidationMessage",
    "ValidationResponse",
    "ValidationStatus",
]
