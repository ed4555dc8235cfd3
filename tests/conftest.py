"""Shared test fixtures for Decision Trace."""

import copy

import pytest


@pytest.fixture
def snake_case_data() -> dict:
    return {
        "case_id": "case_67893",
        "document_id": "doc_12348",
        "decision_title": "Production Database Incident Response",
        "decision_date": "2024-01-22",
        "decision_maker": "David Kim",
        "decision_maker_role": "CTO",
        "decision_status": "RESOLVED",
        "decision_summary": "Response to production database outage incident",
        "context": {
            "incident_severity": "SEV1",
            "affected_systems": [
                {"system_name": "orders-db", "downtime_minutes": 42},
                {"system_name": "billing-db", "downtime_minutes": 7},
            ],
            "business_impact": {"revenue_at_risk": 125000, "customer_tier": "enterprise"},
        },
        "rationale": [
            "Failover restored service within SLA",
            "Root cause isolated to a failed storage volume",
        ],
        "risks_identified": ["Data loss during failover", "Replica lag"],
        "mitigation_strategies": ["Point-in-time recovery", "Replica lag alerting"],
        "expected_outcomes": {
            "recovery_time_objective": "15m",
            "follow_up_actions": [{"action_owner": "SRE", "due_in_days": 14}],
        },
        "confidence_score": 0.88,
        "extracted_at": "2024-01-22T10:30:00Z",
    }


@pytest.fixture
def camel_case_data() -> dict:
    return {
        "caseId": "case_67893",
        "documentId": "doc_12348",
        "decisionTitle": "Production Database Incident Response",
        "decisionDate": "2024-01-22",
        "decisionMaker": "David Kim",
        "decisionMakerRole": "CTO",
        "decisionStatus": "RESOLVED",
        "decisionSummary": "Response to production database outage incident",
        "context": {
            "incidentSeverity": "SEV1",
            "affectedSystems": [
                {"systemName": "orders-db", "downtimeMinutes": 42},
                {"systemName": "billing-db", "downtimeMinutes": 7},
            ],
            "businessImpact": {"revenueAtRisk": 125000, "customerTier": "enterprise"},
        },
        "rationale": [
            "Failover restored service within SLA",
            "Root cause isolated to a failed storage volume",
        ],
        "risksIdentified": ["Data loss during failover", "Replica lag"],
        "mitigationStrategies": ["Point-in-time recovery", "Replica lag alerting"],
        "expectedOutcomes": {
            "recoveryTimeObjective": "15m",
            "followUpActions": [{"actionOwner": "SRE", "dueInDays": 14}],
        },
        "confidenceScore": 0.88,
        "extractedAt": "2024-01-22T10:30:00Z",
    }


@pytest.fixture
def step2_envelope(snake_case_data: dict) -> dict:
    return {"step": 2, "status": "success", "data": snake_case_data, "errors": [], "warnings": []}


@pytest.fixture
def valid_flow_step() -> dict:
    return {
        "step": 1,
        "label": "x",
        "actor": "y",
        "aiInfluence": 0,
        "overrideApplied": False,
        "rulesApplied": [],
        "confidenceDelta": 0,
    }


@pytest.fixture
def valid_ledger(valid_flow_step: dict) -> dict:
    return {
        "decision": {
            "outcome": "Migrate billing to the new provider",
            "confidence": "high",
            "traceScore": 82,
            "scoreRationale": ["Vendor evaluation covered cost and compliance"],
        },
        "flow": [copy.deepcopy(valid_flow_step)],
        "evidenceLedger": [],
        "riskLedger": [],
        "assumptionLedger": [],
        "accountability": {},
    }


@pytest.fixture
def raw_ledger() -> dict:
    """Ledger-like output as the extraction model tends to produce it."""
    return {
        "decision": {"title": "Adopt vendor X for payments", "confidence": "HIGH"},
        "flow": [
            {"label": "Vendor shortlist", "actor": "AI", "aiInfluence": "true"},
            {"step": "2", "actor": "Committee", "overrideApplied": 1, "rulesApplied": ["R1", "", None]},
        ],
        "evidenceLedger": [
            {"claim": "Vendor X fees are 20% lower", "strength": "high"},
            {"evidence": "Reference customer call", "used": False, "weight": "low"},
        ],
        "riskLedger": [
            {"risk": "Migration downtime", "accepted": True},
            {"risk": "Vendor lock-in", "accepted": True, "mitigation": "  Exit clause  "},
        ],
        "assumptionLedger": [
            {"assumption": "Volumes stay flat", "validated": True},
            {"assumption": "No regulatory change"},
        ],
        "accountability": {"owner": "CFO", "stakeholders": ["Finance", "Engineering"]},
    }
