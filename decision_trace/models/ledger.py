"""Decision ledger models.

Field names are snake_case in Python and camelCase on the wire: every model
accepts either form on input and ``model_dump(by_alias=True)`` produces the
camelCase document that the ledger validator and report renderers expect.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from decision_trace.models.enums import Actor, Confidence, Weight


class LedgerModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DecisionEntry(LedgerModel):
    outcome: str
    confidence: Confidence
    trace_score: int = Field(ge=0, le=100)
    score_rationale: list[str] = Field(default_factory=list)


class FlowStep(LedgerModel):
    step: int
    label: str
    actor: Actor
    ai_influence: bool
    override_applied: bool
    rules_applied: list[str] = Field(default_factory=list)
    confidence_delta: float = 0


class EvidenceEntry(LedgerModel):
    evidence: str
    used: bool
    weight: Weight
    confidence_impact: float = 0
    reason: str


class RiskEntry(LedgerModel):
    risk: str
    identified: bool
    accepted: bool
    severity: str
    accepted_by: str = ""
    mitigation: str = ""


class AssumptionEntry(LedgerModel):
    assumption: str
    explicit: bool
    validated: bool
    owner: str = ""
    invalidation_impact: str = ""


class AccountabilityEntry(LedgerModel):
    responsible: str = ""
    accountable: str = ""
    consulted: list[str] = Field(default_factory=list)
    informed: list[str] = Field(default_factory=list)


class DecisionLedger(LedgerModel):
    """Canonical structured record of a decision rendered as a report."""

    decision: DecisionEntry
    flow: list[FlowStep] = Field(default_factory=list)
    evidence_ledger: list[EvidenceEntry] = Field(default_factory=list)
    risk_ledger: list[RiskEntry] = Field(default_factory=list)
    assumption_ledger: list[AssumptionEntry] = Field(default_factory=list)
    accountability: AccountabilityEntry = Field(default_factory=AccountabilityEntry)

    def to_document(self) -> dict:
        """Return the camelCase JSON-ready document."""
        return self.model_dump(mode="json", by_alias=True)
