"""Base interface for submission validators."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from sample_retrieval.models import Manifest, ValidationResponse

ManifestT = TypeVar("ManifestT", bound=Manifest)


class Validator(ABC, Generic[ManifestT]):
    """
    Contract between the submission tool and a validator.

    One implementation exists per submission type (sequence, assembly,
    reads, ...) and is supplied by the plugin that provides it.
    """

    @abstractmethod
    def validate(self, manifest: ManifestT) -> ValidationResponse:
        """
        Validate ``manifest`` and report the outcome.

        Implementations define their own failure semantics and return a
        ``ValidationResponse`` carrying every message they produced.
        """
