from dataclasses import dataclass

import pytest

from sample_retrieval.models import (
    Manifest,
    Severity,
    ValidationMessage,
    ValidationResponse,
    ValidationStatus,
)
from sample_retrieval.validators import Validator


@dataclass
class ReadsManifest(Manifest):
    platform: str = ""


class ReadsValidator(Validator[ReadsManifest]):
    def validate(self, manifest: ReadsManifest) -> ValidationResponse:
        response = ValidationResponse()
        response.add(ValidationMessage.info(f"Validating {manifest.name}"))
        if not manifest.platform:
            response.add(ValidationMessage.error("Missing platform"))
        return response


def test_validator_cannot_be_instantiated_without_validate():
    with pytest.raises(TypeError):
        Validator()  # type: ignore[abstract]

    class Incomplete(Validator[Manifest]):
        pass

    with pytest.raises(TypeError):
        Incomplete()  # type: ignore[abstract]


def test_validator_implementation_reports_success():
    response = ReadsValidator().validate(ReadsManifest(name="run-1", platform="ILLUMINA"))

    assert response.success
    assert response.status == ValidationStatus.VALIDATION_SUCCESS
    assert [message.severity for message in response.messages] == [Severity.INFO]


def test_validator_implementation_reports_errors():
    response = ReadsValidator().validate(ReadsManifest(name="run-2"))

    assert not response.success
    assert response.status == ValidationStatus.VALIDATION_ERROR
    assert response.messages[-1] == ValidationMessage(Severity.ERROR, "Missing platform")
