"""Retrieve sample records from the submission service as XML."""

from __future__ import annotations

import re
from typing import Optional

import requests
from lxml import etree
from tenacity import RetryCallState, wait_exponential

from sample_retrieval.clients.webin import ServiceError, WebinService
from sample_retrieval.logging_utils import get_logger
from sample_retrieval.models import Attribute, Sample
from sample_retrieval.retry import execute_with_retry

logger = get_logger(__name__)

SAMPLE_PATH = "samples/{id}"

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class SampleServiceValidationError(ServiceError):
    """Raised when a sample cannot be retrieved or understood."""

    def __init__(self, sample_id: str) -> None:
        self.sample_id = sample_id
        super().__init__(
            f"Unknown sample {sample_id} or the sample cannot be referenced by your "
            "submission account. Samples must be submitted before they can be "
            "referenced in the submission."
        )


def is_transient_failure(exc: BaseException) -> bool:
    """Server errors and unreachable hosts are worth another attempt."""
    if isinstance(exc, (requests.ConnectionError, requests.Timeout)):
        return True
    if isinstance(exc, requests.HTTPError):
        response = exc.response
        return response is not None and response.status_code >= 500
    return False


class SampleXmlClient(WebinService):
    """Client for the sample XML endpoint."""

    SERVICE_NAME = "SampleXml"

    def get_sample(self, sample_id: str) -> Sample:
        """Fetch and parse the sample, wrapping every failure."""
        if not sample_id or not sample_id.strip():
            raise SampleServiceValidationError(sample_id)
        try:
            sample_xml = self.fetch_sample(sample_id)
        except requests.RequestException as exc:
            raise SampleServiceValidationError(sample_id) from exc
        if not sample_xml:
            raise SampleServiceValidationError(sample_id)
        return parse_sample_xml(sample_id, sample_xml)

    def fetch_sample(self, sample_id: str) -> str:
        """
        Return the raw XML body for ``sample_id``.

        Server errors and network failures are retried; the last failure
        propagates once the attempts are exhausted.
        """
        sample_id = sample_id.strip()
        if not sample_id:
            raise ValueError("sample_id must not be empty")
        url = self.resolve_against_rest_uri(SAMPLE_PATH, id=sample_id)

        with self.new_session() as session:

            def _get() -> str:
                response = session.get(url, timeout=self.settings.request_timeout)
                response.raise_for_status()
                return response.text

            def _log_retry(retry_state: RetryCallState) -> None:
                logger.warning(
                    "Retrying sample xml retrieval from server.",
                    extra={
                        "sample_id": sample_id,
                        "attempt": retry_state.attempt_number,
                    },
                )

            return execute_with_retry(
                _get,
                _log_retry,
                is_transient=is_transient_failure,
                max_attempts=self.settings.retry_max_attempts,
                wait=wait_exponential(
                    multiplier=self.settings.retry_backoff_multiplier,
                    max=self.settings.retry_backoff_max,
                ),
            )


def parse_sample_xml(sample_id: str, sample_xml: str) -> Sample:
    """
    Map a sample XML document onto a :class:`Sample`.

    Any parse or format failure is raised as
    :class:`SampleServiceValidationError` with the root cause chained.
    """
    try:
        return _build_sample(_parse_document(sample_xml))
    except Exception as exc:
        raise SampleServiceValidationError(sample_id) from exc


def _parse_document(sample_xml: str) -> etree._Element:
    # The text is already decoded; the declared encoding no longer applies.
    parser = etree.XMLParser(encoding="utf-8", resolve_entities="internal", no_network=True)
    return etree.fromstring(sample_xml.encode("utf-8"), parser=parser)


def _build_sample(root: etree._Element) -> Sample:
    sample = Sample()

    sample_element = _first(root, "SAMPLE")
    if sample_element is not None:
        sample.name = sample_element.get("alias", "")

    name_element = _first(root, "SAMPLE_NAME")
    if name_element is not None:
        taxon = _first(name_element, "TAXON_ID")
        if taxon is not None:
            sample.tax_id = _parse_int32(_text(taxon))
        scientific_name = _first(name_element, "SCIENTIFIC_NAME")
        if scientific_name is not None:
            sample.organism = _text(scientific_name)

    for attribute_element in root.iter("SAMPLE_ATTRIBUTE"):
        # TAG is mandatory; VALUE and UNITS are not.
        tag = _first(attribute_element, "TAG")
        if tag is None:
            raise ValueError("SAMPLE_ATTRIBUTE is missing its TAG element")
        value = _first(attribute_element, "VALUE")
        units = _first(attribute_element, "UNITS")
        sample.add_attribute(
            Attribute(
                tag=_text(tag),
                value=_text(value) if value is not None else None,
                units=_text(units) if units is not None else None,
            )
        )
    return sample


def _first(element: etree._Element, tag: str) -> Optional[etree._Element]:
    return next(element.iter(tag), None)


def _text(element: etree._Element) -> str:
    return "".join(element.itertext())


def _parse_int32(text: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(text):
        raise ValueError(f"Invalid integer: {text!r}")
    value = int(text)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"Integer out of range: {text!r}")
    return value
