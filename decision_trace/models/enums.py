"""Enumerations for Decision Trace."""

from enum import StrEnum


class Confidence(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Weight(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Actor(StrEnum):
    AI = "AI"
    HUMAN = "Human"
    SYSTEM = "System"


class StepStatus(StrEnum):
    SUCCESS = "success"
    ERROR = "error"
    PARTIAL_SUCCESS = "partial_success"


class Priority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class CandidateType(StrEnum):
    EXPLICIT = "explicit"
    IMPLICIT = "implicit"


class FragmentClassification(StrEnum):
    EVIDENCE = "evidence"
    ASSUMPTION = "assumption"
    RISK = "risk"
    STAKEHOLDER_SIGNAL = "stakeholder_signal"


class RootCauseCategory(StrEnum):
    PROCESS = "process"
    PEOPLE = "people"
    TECHNOLOGY = "technology"
    EXTERNAL = "external"
    STRATEGY = "strategy"


class Severity(StrEnum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class LessonCategory(StrEnum):
    PROCESS = "process"
    DECISION_MAKING = "decision_making"
    EXECUTION = "execution"
    MONITORING = "monitoring"


class ActionStatus(StrEnum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class LedgerFailureReason(StrEnum):
    MISSING_ROOT_OBJECT = "MissingRootObject"
    MISSING_TOP_LEVEL_KEYS = "MissingTopLevelKeys"
    MISSING_DECISION_KEYS = "MissingDecisionKeys"
    INVALID_FLOW_TYPE = "InvalidFlowType"
    INVALID_FLOW_STEP_TYPE = "InvalidFlowStepType"
    MISSING_FLOW_STEP_KEYS = "MissingFlowStepKeys"
