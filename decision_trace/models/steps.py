"""Payload schemas for the six stages of the decision trace pipeline.

Each stage stores an envelope of the form ``{step, status, data, errors, warnings}``.
Keys inside ``data`` are the snake_case names the extraction prompts ask for;
unknown keys are ignored.
"""

from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, StringConstraints

from decision_trace.models.enums import (
    ActionStatus,
    CandidateType,
    FragmentClassification,
    LessonCategory,
    Priority,
    RootCauseCategory,
    Severity,
    StepStatus,
)

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]
IsoDate = Annotated[str, StringConstraints(pattern=r"^\d{4}-\d{2}-\d{2}$")]
UnitInterval = Annotated[float, Field(ge=0, le=1)]


class DecisionCandidate(BaseModel):
    decision_text: NonEmptyStr
    type: CandidateType
    confidence: UnitInterval


class Fragment(BaseModel):
    """A verbatim quote from the source document with its classification."""

    quote: NonEmptyStr
    classification: FragmentClassification
    context: str | None = None
    decision_candidate_index: int | None = None


# --- Step 1: decision inference + categorization ---


class Step1Data(BaseModel):
    document_id: NonEmptyStr
    has_clear_decision: bool
    decision_candidates: list[DecisionCandidate] = Field(default_factory=list)
    fragments: list[Fragment] = Field(default_factory=list)
    no_decision_message: str | None = None
    extracted_at: datetime
    # Legacy metadata
    document_type: str | None = None
    file_name: str | None = None
    file_size: Annotated[int, Field(gt=0)] | None = None
    mime_type: str | None = None


# --- Step 2: decision extraction ---


class Step2Data(Step1Data):
    case_id: NonEmptyStr
    # Legacy decision fields, derived from the forensic analysis
    decision_title: str | None = None
    decision_date: IsoDate | None = None
    decision_maker: str | None = None
    decision_maker_role: str | None = None
    decision_status: str | None = None
    decision_summary: str | None = None
    context: dict[str, Any] = Field(default_factory=dict)
    rationale: list[str] = Field(default_factory=list)
    risks_identified: list[str] = Field(default_factory=list)
    mitigation_strategies: list[str] = Field(default_factory=list)
    expected_outcomes: dict[str, Any] | None = None
    confidence_score: UnitInterval | None = None


# --- Step 3: context analysis ---


class ContextAnalysis(BaseModel):
    business_context: NonEmptyStr
    market_conditions: str | None = None
    organizational_factors: list[str] = Field(default_factory=list)
    external_factors: list[str] = Field(default_factory=list)


class Stakeholder(BaseModel):
    name: NonEmptyStr
    role: str | None = None
    influence: Priority | None = None


class Step3Data(BaseModel):
    case_id: NonEmptyStr
    context_analysis: ContextAnalysis
    stakeholders: list[Stakeholder] = Field(default_factory=list)
    analysis_date: datetime


# --- Step 4: outcome analysis ---


class ExpectedVsActual(BaseModel):
    metric: str
    expected: Any = None
    actual: Any = None
    variance: float | None = None


class OutcomeAnalysis(BaseModel):
    actual_outcomes: dict[str, Any] = Field(default_factory=dict)
    expected_vs_actual: list[ExpectedVsActual] = Field(default_factory=list)
    success_indicators: list[str] = Field(default_factory=list)
    failure_indicators: list[str] = Field(default_factory=list)


class ImpactAssessment(BaseModel):
    financial_impact: float | None = None
    operational_impact: str | None = None
    reputation_impact: str | None = None


class Step4Data(BaseModel):
    case_id: NonEmptyStr
    outcome_analysis: OutcomeAnalysis
    impact_assessment: ImpactAssessment | None = None
    analysis_date: datetime


# --- Step 5: root cause analysis ---


class RootCause(BaseModel):
    cause: NonEmptyStr
    category: RootCauseCategory
    severity: Severity
    evidence: list[str] = Field(default_factory=list)


class Step5Data(BaseModel):
    case_id: NonEmptyStr
    root_causes: list[RootCause] = Field(min_length=1)
    contributing_factors: list[str] = Field(default_factory=list)
    analysis_date: datetime


# --- Step 6: lessons learned and recommendations ---


class Lesson(BaseModel):
    lesson: NonEmptyStr
    category: LessonCategory
    priority: Priority


class Recommendation(BaseModel):
    recommendation: NonEmptyStr
    priority: Priority
    feasibility: Priority
    expected_impact: str | None = None


class ActionItem(BaseModel):
    action: NonEmptyStr
    owner: str | None = None
    due_date: IsoDate | None = None
    status: ActionStatus | None = None


class Step6Data(BaseModel):
    case_id: NonEmptyStr
    lessons_learned: list[Lesson] = Field(min_length=1)
    recommendations: list[Recommendation] = Field(min_length=1)
    action_items: list[ActionItem] = Field(default_factory=list)
    completion_date: datetime


# --- Envelopes ---


class StepPayload(BaseModel):
    status: StepStatus
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class Step1Payload(StepPayload):
    step: Literal[1]
    data: Step1Data


class Step2Payload(StepPayload):
    step: Literal[2]
    data: Step2Data


class Step3Payload(StepPayload):
    step: Literal[3]
    data: Step3Data


class Step4Payload(StepPayload):
    step: Literal[4]
    data: Step4Data


class Step5Payload(StepPayload):
    step: Literal[5]
    data: Step5Data


class Step6Payload(StepPayload):
    step: Literal[6]
    data: Step6Data


STEP_SCHEMAS: dict[int, type[StepPayload]] = {
    1: Step1Payload,
    2: Step2Payload,
    3: Step3Payload,
    4: Step4Payload,
    5: Step5Payload,
    6: Step6Payload,
}
