"""Clients for the submission REST service."""

from .sample_xml import (
    SampleServiceValidationError,
    SampleXmlClient,
    is_transient_failure,
    parse_sample_xml,
)
from .webin import ServiceError, WebinService

__all__ = [
    "SampleServiceValidationError",
    "SampleXmlClient",
    "ServiceError",
    "WebinService",
    "is_transient_failure",
    "parse_sample_xml",
]
