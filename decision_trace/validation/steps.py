"""Step payload validation against the pipeline schemas."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ValidationError

from decision_trace.models.steps import STEP_SCHEMAS


@dataclass
class StepValidationResult:
    """Parsed model on success, friendly error messages otherwise."""

    success: bool
    data: BaseModel | None = None
    errors: list[str] = field(default_factory=list)


def format_validation_errors(error: ValidationError) -> list[str]:
    """Turn a pydantic ValidationError into ``path.to.field: message`` strings."""
    issues = error.errors()
    if not issues:
        return ["Validation error: no details available"]

    messages = []
    for issue in issues:
        path = ".".join(str(part) for part in issue.get("loc", ()))
        message = issue.get("msg") or "Validation failed"
        messages.append(f"{path}: {message}" if path else message)
    return messages


def validate_with_schema(schema: type[BaseModel], data: Any) -> StepValidationResult:
    """Validate ``data`` against ``schema`` without raising."""
    try:
        parsed = schema.model_validate(data)
    except ValidationError as e:
        return StepValidationResult(success=False, errors=format_validation_errors(e))
    return StepValidationResult(success=True, data=parsed)


def validate_step_payload(payload: Any) -> StepValidationResult:
    """Validate a stored step envelope against the schema for its ``step`` number."""
    if not isinstance(payload, Mapping):
        return StepValidationResult(success=False, errors=["Step payload must be an object"])

    step = payload.get("step")
    schema = STEP_SCHEMAS.get(step) if isinstance(step, int) and not isinstance(step, bool) else None
    if schema is None:
        supported = ", ".join(str(n) for n in STEP_SCHEMAS)
        return StepValidationResult(
            success=False,
            errors=[f"step: unsupported step {step!r} (expected one of {supported})"],
        )
    return validate_with_schema(schema, payload)
