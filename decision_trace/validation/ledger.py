"""Structural validation of decision-ledger documents.

Checks run in a fixed order and stop at the first failing stage: top-level
keys (all missing keys reported together), then the ``decision`` object (all
missing keys reported together), then ``flow`` (stops at the first bad step).
Only key presence is checked; values and types of leaves are not.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from decision_trace.models.enums import LedgerFailureReason

REQUIRED_TOP_LEVEL_KEYS = (
    "decision",
    "flow",
    "evidenceLedger",
    "riskLedger",
    "assumptionLedger",
    "accountability",
)
REQUIRED_DECISION_KEYS = ("outcome", "confidence", "traceScore", "scoreRationale")
REQUIRED_FLOW_STEP_KEYS = (
    "step",
    "label",
    "actor",
    "aiInfluence",
    "overrideApplied",
    "rulesApplied",
    "confidenceDelta",
)


@dataclass(frozen=True)
class LedgerValidationResult:
    """Outcome of validate_decision_ledger."""

    ok: bool
    error: str | None = None
    missing_fields: list[str] = field(default_factory=list)
    reason: LedgerFailureReason | None = None

    def as_dict(self) -> dict[str, Any]:
        """Tagged form for JSON responses: ``{ok}`` or ``{ok, error, missingFields}``."""
        if self.ok:
            return {"ok": True}
        return {"ok": False, "error": self.error, "missingFields": list(self.missing_fields)}


def validate_decision_ledger(candidate: Any) -> LedgerValidationResult:
    """Validate that ``candidate`` has the structure of a decision ledger."""
    # Only mappings are objects here; a list root fails instead of reporting missing keys
    if not isinstance(candidate, Mapping):
        return _fail(
            LedgerFailureReason.MISSING_ROOT_OBJECT,
            "Ledger must be an object.",
            ["(root: must be an object)"],
        )

    missing = [key for key in REQUIRED_TOP_LEVEL_KEYS if key not in candidate]
    if missing:
        quoted = ", ".join(f'"{key}"' for key in missing)
        return _fail(
            LedgerFailureReason.MISSING_TOP_LEVEL_KEYS,
            f"Missing required key(s): {quoted}.",
            missing,
        )

    decision = candidate["decision"]
    if not isinstance(decision, Mapping):
        return _fail(
            LedgerFailureReason.MISSING_DECISION_KEYS,
            "decision must be an object.",
            ["decision (object)"],
        )
    missing = [key for key in REQUIRED_DECISION_KEYS if key not in decision]
    if missing:
        return _fail(
            LedgerFailureReason.MISSING_DECISION_KEYS,
            f"decision missing required key(s): {', '.join(missing)}.",
            [f"decision.{key}" for key in missing],
        )

    flow = candidate["flow"]
    if not isinstance(flow, (list, tuple)):
        return _fail(
            LedgerFailureReason.INVALID_FLOW_TYPE,
            '"flow" must be an array.',
            ["flow (array)"],
        )

    for index, step in enumerate(flow):
        if not isinstance(step, Mapping):
            return _fail(
                LedgerFailureReason.INVALID_FLOW_STEP_TYPE,
                f"Flow step {index + 1} must be an object.",
                [f"flow[{index}] (object)"],
            )
        missing = [key for key in REQUIRED_FLOW_STEP_KEYS if key not in step]
        if missing:
            return _fail(
                LedgerFailureReason.MISSING_FLOW_STEP_KEYS,
                f"Flow step {index + 1} is missing: {', '.join(missing)}. "
                f"Required: {', '.join(REQUIRED_FLOW_STEP_KEYS)}.",
                [f"flow[{index}].{key}" for key in missing],
            )

    return LedgerValidationResult(ok=True)


def _fail(reason: LedgerFailureReason, error: str, missing_fields: list[str]) -> LedgerValidationResult:
    return LedgerValidationResult(ok=False, error=error, missing_fields=missing_fields, reason=reason)
