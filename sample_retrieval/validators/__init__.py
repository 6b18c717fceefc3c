"""Validator contract consumed by submission-type plugins."""

from .base import ManifestT, Validator

__all__ = ["ManifestT", "Validator"]
