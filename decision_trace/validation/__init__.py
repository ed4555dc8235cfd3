"""Validation of decision ledgers, step payloads and generated text."""

from decision_trace.validation.echo import calculate_text_overlap, find_echo_violations, has_excessive_echo
from decision_trace.validation.ledger import LedgerValidationResult, validate_decision_ledger
from decision_trace.validation.steps import (
    StepValidationResult,
    format_validation_errors,
    validate_step_payload,
    validate_with_schema,
)

__all__ = [
    "LedgerValidationResult",
    "StepValidationResult",
    "calculate_text_overlap",
    "find_echo_violations",
    "format_validation_errors",
    "has_excessive_echo",
    "validate_decision_ledger",
    "validate_step_payload",
    "validate_with_schema",
]
