"""Score rationale: concrete, explainable reasons behind a ledger's trace score."""

from decision_trace.models.enums import Weight
from decision_trace.models.ledger import DecisionLedger

MIN_RATIONALE_ITEMS = 3
MAX_RATIONALE_ITEMS = 6
MIN_AVG_LENGTH = 25


def is_score_rationale_too_generic(rationale: list[str] | None) -> bool:
    """True if the rationale is missing, too short, or made of terse items."""
    if not rationale or len(rationale) < MIN_RATIONALE_ITEMS:
        return True
    total_length = sum(len((item or "").strip()) for item in rationale)
    return total_length / len(rationale) < MIN_AVG_LENGTH


def derive_score_rationale(ledger: DecisionLedger) -> list[str]:
    """Summarize evidence, risks, assumptions, flow and accountability into reasons.

    Same ledger in, same reasons out.
    """
    reasons: list[str] = []

    evidence = ledger.evidence_ledger
    if evidence:
        used = sum(1 for e in evidence if e.used)
        parts = []
        for weight in (Weight.HIGH, Weight.MEDIUM, Weight.LOW):
            count = sum(1 for e in evidence if e.weight == weight)
            if count:
                parts.append(f"{count} {weight.value}")
        reasons.append(f"Evidence: {len(evidence)} item(s), {used} used ({', '.join(parts)} weight).")
    else:
        reasons.append("Evidence: no evidence items recorded.")

    risks = ledger.risk_ledger
    if risks:
        accepted = sum(1 for r in risks if r.accepted)
        mitigated = sum(1 for r in risks if r.mitigation.strip())
        reasons.append(f"Risks: {len(risks)} identified; {accepted} accepted; {mitigated} with mitigation.")
    else:
        reasons.append("Risks: none recorded.")

    assumptions = ledger.assumption_ledger
    if assumptions:
        validated = sum(1 for a in assumptions if a.validated)
        reasons.append(
            f"Assumptions: {len(assumptions)} total; {validated} validated, "
            f"{len(assumptions) - validated} unvalidated."
        )
    else:
        reasons.append("Assumptions: none recorded.")

    flow = ledger.flow
    if flow:
        ai_steps = sum(1 for s in flow if s.ai_influence)
        override_steps = sum(1 for s in flow if s.override_applied)
        reasons.append(
            f"Decision flow: {len(flow)} step(s); AI influenced {ai_steps}; "
            f"override applied in {override_steps}."
        )
    else:
        reasons.append("Decision flow: no steps recorded.")

    acc = ledger.accountability
    responsible = "set" if acc.responsible.strip() else "not set"
    accountable = "set" if acc.accountable.strip() else "not set"
    reasons.append(
        f"Accountability: responsible {responsible}; accountable {accountable}; "
        f"{len(acc.consulted)} consulted; {len(acc.informed)} informed."
    )

    return reasons[:MAX_RATIONALE_ITEMS]


def ensure_score_rationale(ledger: DecisionLedger) -> DecisionLedger:
    """Return a copy of ``ledger`` whose score rationale supports its trace score.

    An empty rationale is replaced by the derived reasons; a generic one is
    extended with them, capped at ``MAX_RATIONALE_ITEMS``.
    """
    current = ledger.decision.score_rationale
    if not current:
        rationale = derive_score_rationale(ledger)
    elif is_score_rationale_too_generic(current):
        rationale = [*current, *derive_score_rationale(ledger)][:MAX_RATIONALE_ITEMS]
    else:
        return ledger.model_copy(deep=True)

    decision = ledger.decision.model_copy(update={"score_rationale": rationale})
    return ledger.model_copy(update={"decision": decision}, deep=True)
