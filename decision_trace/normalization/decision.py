"""Decision data normalization: step-2 extraction output to a canonical view model.

The extraction model is prompted for snake_case JSON, but stored steps, demo
fixtures and hand-edited payloads also arrive in camelCase, and optional fields
are routinely missing or null. Every consumer downstream of this module reads
one fixed shape instead::

    {
        "caseId": str | None,
        "documentId": str | None,
        "decisionTitle": str | None,
        "decisionDate": str | None,
        "decisionMaker": str | None,
        "decisionMakerRole": str | None,
        "decisionStatus": str | None,
        "decisionSummary": str | None,
        "context": dict,
        "rationale": list,
        "risksIdentified": list,
        "mitigationStrategies": list,
        "expectedOutcomes": dict | None,
        "confidenceScore": int | float | None,
        "extractedAt": str | None,
    }

Normalization never raises: anything unusable degrades to the field default.
"""

import logging
import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from decision_trace.normalization.casing import camel_to_snake, recase_keys

logger = logging.getLogger(__name__)

SCALAR_FIELDS = (
    "caseId",
    "documentId",
    "decisionTitle",
    "decisionDate",
    "decisionMaker",
    "decisionMakerRole",
    "decisionStatus",
    "decisionSummary",
)
SEQUENCE_FIELDS = ("rationale", "risksIdentified", "mitigationStrategies")

VIEW_FIELDS = (
    *SCALAR_FIELDS,
    "context",
    "rationale",
    "risksIdentified",
    "mitigationStrategies",
    "expectedOutcomes",
    "confidenceScore",
    "extractedAt",
)


def normalize_decision_data(raw: Any) -> dict[str, Any]:
    """Normalize one decision-extraction object into the canonical view model.

    Each field is looked up under its camelCase name first, then its
    snake_case name; the first key present wins, and a null value falls back
    to the field default.
    """
    if isinstance(raw, Mapping):
        data = raw
    else:
        if raw is not None:
            logger.debug("Decision data is %s, not an object; using defaults", type(raw).__name__)
        data = {}

    view: dict[str, Any] = {field: _lookup(data, field) for field in SCALAR_FIELDS}

    context = _nested(data, "context")
    view["context"] = context if context is not None else {}
    for field in SEQUENCE_FIELDS:
        view[field] = _sequence(data, field)
    view["expectedOutcomes"] = _nested(data, "expectedOutcomes")
    view["confidenceScore"] = _number(data, "confidenceScore")
    view["extractedAt"] = _lookup(data, "extractedAt")

    return {field: view[field] for field in VIEW_FIELDS}


def normalize_step2_response(full_payload: Any) -> dict[str, Any]:
    """Normalize a stored step envelope (``{step, status, data}``) by its ``data`` object."""
    if not isinstance(full_payload, Mapping):
        logger.warning("Step 2 response is %s, not an object; using defaults", type(full_payload).__name__)
        return normalize_decision_data(None)

    data = full_payload.get("data")
    if not isinstance(data, Mapping):
        logger.warning("Step 2 response has no data object (status=%s); using defaults", full_payload.get("status"))
    elif full_payload.get("step") not in (None, 2):
        logger.debug("Normalizing step %s payload as decision data", full_payload.get("step"))
    return normalize_decision_data(data)


def _lookup(data: Mapping, field: str) -> Any:
    if field in data:
        return data[field]
    return data.get(camel_to_snake(field))


def _sequence(data: Mapping, field: str) -> list:
    value = _lookup(data, field)
    if isinstance(value, (list, tuple)):
        return list(value)
    if value is not None:
        logger.debug("Ignoring non-list value for %s: %r", field, value)
    return []


def _nested(data: Mapping, field: str) -> dict | None:
    value = _lookup(data, field)
    if isinstance(value, Mapping):
        return recase_keys(value)
    return None


def _number(data: Mapping, field: str) -> int | float | None:
    value = _lookup(data, field)
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None
