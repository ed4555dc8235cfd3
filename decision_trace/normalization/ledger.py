"""Ledger normalization: coerce ledger-like model output into a valid DecisionLedger.

Maps the alternative keys the extraction model tends to emit (``title`` for
``outcome``, ``claim``/``strength`` for evidence, ``owner``/``stakeholders``
for accountability), fills every required field with a default and computes
the trace score when the model did not supply one.
"""

import logging
import math
from collections.abc import Mapping
from decimal import Decimal
from enum import StrEnum
from typing import Any, TypeVar

from decision_trace.exceptions import LedgerInputError
from decision_trace.models.enums import Actor, Confidence, Weight
from decision_trace.models.ledger import (
    AccountabilityEntry,
    AssumptionEntry,
    DecisionEntry,
    DecisionLedger,
    EvidenceEntry,
    FlowStep,
    RiskEntry,
)
from decision_trace.normalization.casing import recase_keys

logger = logging.getLogger(__name__)

BASE_TRACE_SCORE = 70
MAX_OUTCOME_LENGTH = 500
DEFAULT_OUTCOME = "Decision outcome not specified"

_EVIDENCE_WEIGHT_POINTS = {Weight.HIGH: 5, Weight.MEDIUM: 3, Weight.LOW: 1}
_TRUE_STRINGS = {"true", "yes", "y", "1"}
_FALSE_STRINGS = {"false", "no", "n", "0", ""}

E = TypeVar("E", bound=StrEnum)


def normalize_ledger(raw: Any) -> DecisionLedger:
    """Normalize raw ledger-like input into a fully populated DecisionLedger.

    Keys are recased to camelCase first, so snake_case documents are accepted.

    Raises:
        LedgerInputError: if ``raw`` is not an object.
    """
    if not isinstance(raw, Mapping):
        raise LedgerInputError(type(raw).__name__)

    data = recase_keys(raw)

    evidence_ledger = [_normalize_evidence(item) for item in _as_list(data.get("evidenceLedger"))]
    risk_ledger = [_normalize_risk(item) for item in _as_list(data.get("riskLedger"))]
    assumption_ledger = [_normalize_assumption(item) for item in _as_list(data.get("assumptionLedger"))]
    flow = [_normalize_flow_step(item, index) for index, item in enumerate(_as_list(data.get("flow")))]

    decision = _normalize_decision(
        data.get("decision"),
        evidence_ledger=evidence_ledger,
        risk_ledger=risk_ledger,
        assumption_ledger=assumption_ledger,
    )

    return DecisionLedger(
        decision=decision,
        flow=flow,
        evidence_ledger=evidence_ledger,
        risk_ledger=risk_ledger,
        assumption_ledger=assumption_ledger,
        accountability=_normalize_accountability(data.get("accountability")),
    )


def compute_trace_score(
    evidence: list[EvidenceEntry],
    risks: list[RiskEntry],
    assumptions: list[AssumptionEntry],
) -> int:
    """Score how well a decision is traced, from 0 to 100.

    Starts at 70; used evidence adds points by weight and unused evidence costs 2;
    an accepted risk without mitigation costs 3, any other identified risk 1;
    each validated assumption adds 1 and each unvalidated one costs 2.
    """
    score = BASE_TRACE_SCORE

    for entry in evidence:
        if entry.used:
            score += _EVIDENCE_WEIGHT_POINTS.get(entry.weight, 1)
        else:
            score -= 2

    for risk in risks:
        if risk.accepted and not risk.mitigation.strip():
            score -= 3
        elif risk.identified:
            score -= 1

    for assumption in assumptions:
        score += 1 if assumption.validated else -2

    return _clamp_score(score)


# --- Sections ---


def _normalize_decision(
    raw: Any,
    evidence_ledger: list[EvidenceEntry],
    risk_ledger: list[RiskEntry],
    assumption_ledger: list[AssumptionEntry],
) -> DecisionEntry:
    o = _as_dict(raw)
    outcome = (
        _as_str(o.get("outcome")).strip()
        or _as_str(o.get("title")).strip()
        or _as_str(o.get("description")).strip()[:MAX_OUTCOME_LENGTH]
        or DEFAULT_OUTCOME
    )

    raw_score = o.get("traceScore")
    if _is_number(raw_score):
        trace_score = _clamp_score(float(raw_score))
    else:
        trace_score = compute_trace_score(evidence_ledger, risk_ledger, assumption_ledger)
        logger.debug("No usable traceScore (%r); computed %d", raw_score, trace_score)

    return DecisionEntry(
        outcome=outcome,
        confidence=_pick(o.get("confidence"), Confidence, Confidence.MEDIUM),
        trace_score=trace_score,
        score_rationale=_as_str_list(o.get("scoreRationale")),
    )


def _normalize_evidence(raw: Any) -> EvidenceEntry:
    o = _as_dict(raw)
    evidence = (
        _as_str(o.get("evidence")).strip()
        or _as_str(o.get("claim")).strip()
        or _as_str(o.get("source")).strip()
    )
    weight = o.get("weight")
    if weight is None:
        weight = o.get("strength")
    used = _as_bool(o["used"]) if "used" in o else True

    return EvidenceEntry(
        evidence=evidence,
        used=used,
        weight=_pick(weight, Weight, Weight.MEDIUM),
        confidence_impact=_as_number(o.get("confidenceImpact"), 0),
        reason=_as_str(o.get("reason")).strip() or ("Used in decision" if used else "Not used"),
    )


def _normalize_flow_step(raw: Any, index: int) -> FlowStep:
    o = _as_dict(raw)
    number = _as_number(o.get("step"), index + 1)
    step = int(number) if float(number).is_integer() else index + 1
    confidence_delta = o.get("confidenceDelta")

    return FlowStep(
        step=step,
        label=_as_str(o.get("label")).strip() or f"Step {step}",
        actor=_pick(o.get("actor"), Actor, Actor.HUMAN),
        ai_influence=_as_bool(o.get("aiInfluence")),
        override_applied=_as_bool(o.get("overrideApplied")),
        rules_applied=_as_str_list(o.get("rulesApplied")),
        confidence_delta=float(confidence_delta) if _is_number(confidence_delta) else 0,
    )


def _normalize_risk(raw: Any) -> RiskEntry:
    o = _as_dict(raw)
    return RiskEntry(
        risk=_as_str(o.get("risk")).strip() or "Unspecified risk",
        identified=_as_bool(o["identified"]) if "identified" in o else True,
        accepted=_as_bool(o.get("accepted")),
        severity=_as_str(o.get("severity")).strip() or "medium",
        accepted_by=_as_str(o.get("acceptedBy")).strip(),
        mitigation=_as_str(o.get("mitigation")).strip(),
    )


def _normalize_assumption(raw: Any) -> AssumptionEntry:
    o = _as_dict(raw)
    return AssumptionEntry(
        assumption=_as_str(o.get("assumption")).strip() or "Unspecified assumption",
        explicit=_as_bool(o.get("explicit")),
        validated=_as_bool(o.get("validated")),
        owner=_as_str(o.get("owner")).strip(),
        invalidation_impact=_as_str(o.get("invalidationImpact")).strip(),
    )


def _normalize_accountability(raw: Any) -> AccountabilityEntry:
    o = _as_dict(raw)
    responsible = _as_str(o.get("responsible")).strip()
    accountable = _as_str(o.get("accountable")).strip()
    consulted = _as_str_list(o.get("consulted"), keep_empty=True)
    informed = _as_str_list(o.get("informed"), keep_empty=True)

    owner = _as_str(o.get("owner")).strip()
    stakeholders = _as_str_list(o.get("stakeholders"), keep_empty=True)

    if owner:
        responsible = responsible or owner
        accountable = accountable or owner
    if stakeholders and not consulted:
        consulted = list(stakeholders)
    if stakeholders and not informed and not consulted:
        informed = list(stakeholders)

    return AccountabilityEntry(
        responsible=responsible,
        accountable=accountable,
        consulted=consulted,
        informed=informed,
    )


# --- Coercion helpers ---


def _as_dict(value: Any) -> Mapping:
    return value if isinstance(value, Mapping) else {}


def _as_list(value: Any) -> list:
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _as_str_list(value: Any, keep_empty: bool = False) -> list[str]:
    items = [_as_str(item) for item in _as_list(value)]
    if keep_empty:
        return items
    return [item for item in items if item]


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float, Decimal)):
        # Ints beyond float range count as non-finite
        try:
            return math.isfinite(float(value))
        except OverflowError:
            return False
    return False


def _as_number(value: Any, fallback: float) -> float:
    if _is_number(value):
        return float(value)
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return fallback
        return number if math.isfinite(number) else fallback
    return fallback


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return bool(value)


def _pick(value: Any, allowed: type[E], fallback: E) -> E:
    if isinstance(value, str):
        try:
            return allowed(value)
        except ValueError:
            pass
    return fallback


def _clamp_score(score: float) -> int:
    # Half-up rounding
    return max(0, min(100, math.floor(score + 0.5)))
