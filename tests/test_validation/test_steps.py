"""Tests for step payload validation."""

import pytest

from decision_trace.models.steps import Step1Payload, Step2Payload
from decision_trace.validation.steps import validate_step_payload, validate_with_schema


@pytest.fixture
def step1_payload() -> dict:
    return {
        "step": 1,
        "status": "success",
        "data": {
            "document_id": "doc_12348",
            "has_clear_decision": True,
            "decision_candidates": [
                {"decision_text": "Fail over to the replica", "type": "explicit", "confidence": 0.9},
            ],
            "fragments": [{"quote": "We will fail over tonight", "classification": "evidence"}],
            "extracted_at": "2024-01-22T10:30:00Z",
        },
    }


class TestValidateStepPayload:
    def test_valid_step1(self, step1_payload: dict):
        result = validate_step_payload(step1_payload)
        assert result.success is True
        assert isinstance(result.data, Step1Payload)
        assert result.data.data.decision_candidates[0].decision_text == "Fail over to the replica"
        assert result.errors == []

    def test_valid_step2(self, step2_envelope: dict):
        step2_envelope["data"]["has_clear_decision"] = True
        result = validate_step_payload(step2_envelope)
        assert result.success is True
        assert isinstance(result.data, Step2Payload)
        assert result.data.data.decision_maker_role == "CTO"

    def test_out_of_range_confidence(self, step1_payload: dict):
        step1_payload["data"]["decision_candidates"][0]["confidence"] = 1.5
        result = validate_step_payload(step1_payload)
        assert result.success is False
        assert result.data is None
        assert result.errors[0].startswith("data.decision_candidates.0.confidence: ")

    def test_invalid_date_format(self, step2_envelope: dict):
        step2_envelope["data"]["has_clear_decision"] = True
        step2_envelope["data"]["decision_date"] = "22/01/2024"
        result = validate_step_payload(step2_envelope)
        assert result.success is False
        assert any(error.startswith("data.decision_date: ") for error in result.errors)

    def test_missing_required_fields_are_all_reported(self):
        result = validate_step_payload({"step": 5, "status": "success", "data": {"root_causes": []}})
        assert result.success is False
        paths = {error.split(":")[0] for error in result.errors}
        assert {"data.case_id", "data.root_causes", "data.analysis_date"} <= paths

    def test_invalid_status(self, step1_payload: dict):
        step1_payload["status"] = "done"
        result = validate_step_payload(step1_payload)
        assert result.success is False
        assert result.errors[0].startswith("status: ")

    @pytest.mark.parametrize("step", [0, 7, "2", None, True])
    def test_unsupported_step(self, step):
        result = validate_step_payload({"step": step, "status": "success", "data": {}})
        assert result.success is False
        assert result.errors == [f"step: unsupported step {step!r} (expected one of 1, 2, 3, 4, 5, 6)"]

    def test_non_object_payload(self):
        result = validate_step_payload(["step", 1])
        assert result.success is False
        assert result.errors == ["Step payload must be an object"]


class TestValidateWithSchema:
    def test_does_not_raise(self):
        result = validate_with_schema(Step1Payload, "not a payload")
        assert result.success is False
        assert result.errors

    def test_unknown_keys_are_ignored(self, step1_payload: dict):
        step1_payload["data"]["model_notes"] = "extra"
        assert validate_with_schema(Step1Payload, step1_payload).success is True
