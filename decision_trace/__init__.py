"""Decision Trace: normalization and validation of LLM-extracted decision data."""

from decision_trace.normalization import normalize_decision_data, normalize_ledger, normalize_step2_response
from decision_trace.store import ReportStore
from decision_trace.validation import validate_decision_ledger

__version__ = "0.1.0"

__all__ = [
    "ReportStore",
    "normalize_decision_data",
    "normalize_ledger",
    "normalize_step2_response",
    "validate_decision_ledger",
]
