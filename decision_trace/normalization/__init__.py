"""Normalization layer for decision data and decision ledgers."""

from decision_trace.normalization.casing import camel_to_snake, recase_keys, snake_to_camel
from decision_trace.normalization.decision import normalize_decision_data, normalize_step2_response
from decision_trace.normalization.ledger import compute_trace_score, normalize_ledger
from decision_trace.normalization.rationale import (
    derive_score_rationale,
    ensure_score_rationale,
    is_score_rationale_too_generic,
)

__all__ = [
    "camel_to_snake",
    "compute_trace_score",
    "derive_score_rationale",
    "ensure_score_rationale",
    "is_score_rationale_too_generic",
    "normalize_decision_data",
    "normalize_ledger",
    "normalize_step2_response",
    "recase_keys",
    "snake_to_camel",
]
