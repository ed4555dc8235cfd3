"""Data models for Decision Trace."""

from decision_trace.models.enums import (
    Actor,
    Confidence,
    LedgerFailureReason,
    StepStatus,
    Weight,
)
from decision_trace.models.ledger import (
    AccountabilityEntry,
    AssumptionEntry,
    DecisionEntry,
    DecisionLedger,
    EvidenceEntry,
    FlowStep,
    RiskEntry,
)
from decision_trace.models.steps import (
    STEP_SCHEMAS,
    Step1Payload,
    Step2Payload,
    Step3Payload,
    Step4Payload,
    Step5Payload,
    Step6Payload,
    StepPayload,
)

__all__ = [
    "AccountabilityEntry",
    "Actor",
    "AssumptionEntry",
    "Confidence",
    "DecisionEntry",
    "DecisionLedger",
    "EvidenceEntry",
    "FlowStep",
    "LedgerFailureReason",
    "RiskEntry",
    "STEP_SCHEMAS",
    "Step1Payload",
    "Step2Payload",
    "Step3Payload",
    "Step4Payload",
    "Step5Payload",
    "Step6Payload",
    "StepPayload",
    "StepStatus",
    "Weight",
]
