"""Tests for decision data normalization."""

import json

from decision_trace.normalization.decision import (
    VIEW_FIELDS,
    normalize_decision_data,
    normalize_step2_response,
)


class TestSnakeCaseInput:
    def test_fields_are_mapped_to_camel_case(self, snake_case_data: dict):
        view = normalize_decision_data(snake_case_data)
        assert view["caseId"] == "case_67893"
        assert view["documentId"] == "doc_12348"
        assert view["decisionTitle"] == "Production Database Incident Response"
        assert view["decisionDate"] == "2024-01-22"
        assert view["decisionMaker"] == "David Kim"
        assert view["decisionMakerRole"] == "CTO"
        assert view["decisionStatus"] == "RESOLVED"
        assert view["decisionSummary"] == "Response to production database outage incident"
        assert view["risksIdentified"] == ["Data loss during failover", "Replica lag"]
        assert view["mitigationStrategies"] == ["Point-in-time recovery", "Replica lag alerting"]
        assert view["confidenceScore"] == 0.88
        assert view["extractedAt"] == "2024-01-22T10:30:00Z"

    def test_nested_context_is_recased(self, snake_case_data: dict):
        view = normalize_decision_data(snake_case_data)
        assert view["context"] == {
            "incidentSeverity": "SEV1",
            "affectedSystems": [
                {"systemName": "orders-db", "downtimeMinutes": 42},
                {"systemName": "billing-db", "downtimeMinutes": 7},
            ],
            "businessImpact": {"revenueAtRisk": 125000, "customerTier": "enterprise"},
        }

    def test_expected_outcomes_lists_of_objects_are_recased(self, snake_case_data: dict):
        view = normalize_decision_data(snake_case_data)
        assert view["expectedOutcomes"] == {
            "recoveryTimeObjective": "15m",
            "followUpActions": [{"actionOwner": "SRE", "dueInDays": 14}],
        }

    def test_input_is_not_mutated(self, snake_case_data: dict):
        before = json.dumps(snake_case_data, sort_keys=True)
        view = normalize_decision_data(snake_case_data)
        view["rationale"].append("extra")
        view["context"]["businessImpact"]["customerTier"] = "smb"
        assert json.dumps(snake_case_data, sort_keys=True) == before


class TestFormatInvariance:
    def test_snake_and_camel_produce_identical_output(self, snake_case_data: dict, camel_case_data: dict):
        snake_view = normalize_decision_data(snake_case_data)
        camel_view = normalize_decision_data(camel_case_data)
        assert json.dumps(snake_view) == json.dumps(camel_view)

    def test_key_set_and_order_are_fixed(self, snake_case_data: dict, camel_case_data: dict):
        assert list(normalize_decision_data(snake_case_data)) == list(VIEW_FIELDS)
        assert list(normalize_decision_data(camel_case_data)) == list(VIEW_FIELDS)
        assert list(normalize_decision_data({})) == list(VIEW_FIELDS)

    def test_mixed_casing(self, snake_case_data: dict):
        mixed = dict(snake_case_data)
        mixed["decisionMaker"] = mixed.pop("decision_maker")
        mixed["risksIdentified"] = mixed.pop("risks_identified")
        view = normalize_decision_data(mixed)
        assert view == normalize_decision_data(snake_case_data)


class TestPrecedence:
    def test_camel_case_wins_over_snake_case(self):
        view = normalize_decision_data({"decision_title": "Launch", "decisionTitle": "Override"})
        assert view["decisionTitle"] == "Override"

    def test_camel_case_wins_regardless_of_key_order(self):
        view = normalize_decision_data({"decisionTitle": "Override", "decision_title": "Launch"})
        assert view["decisionTitle"] == "Override"

    def test_camel_case_sequence_wins(self):
        view = normalize_decision_data({"risks_identified": ["a"], "risksIdentified": ["b"]})
        assert view["risksIdentified"] == ["b"]

    def test_present_camel_null_applies_default(self):
        view = normalize_decision_data({"decisionTitle": None, "decision_title": "Launch"})
        assert view["decisionTitle"] is None

    def test_nested_camel_key_wins_inside_context(self):
        view = normalize_decision_data({"context": {"team_size": 3, "teamSize": 5}})
        assert view["context"] == {"teamSize": 5}


class TestDefaults:
    def test_empty_object_gives_all_defaults(self):
        assert normalize_decision_data({}) == {
            "caseId": None,
            "documentId": None,
            "decisionTitle": None,
            "decisionDate": None,
            "decisionMaker": None,
            "decisionMakerRole": None,
            "decisionStatus": None,
            "decisionSummary": None,
            "context": {},
            "rationale": [],
            "risksIdentified": [],
            "mitigationStrategies": [],
            "expectedOutcomes": None,
            "confidenceScore": None,
            "extractedAt": None,
        }

    def test_null_sequence_becomes_empty_list(self):
        view = normalize_decision_data({"risks_identified": None})
        assert view["risksIdentified"] == []

    def test_null_values(self, snake_case_data: dict):
        data = dict(snake_case_data)
        for key in ("decision_title", "decision_maker_role", "decision_summary", "mitigation_strategies", "expected_outcomes", "context"):
            data[key] = None
        view = normalize_decision_data(data)
        assert view["decisionTitle"] is None
        assert view["decisionMakerRole"] is None
        assert view["decisionSummary"] is None
        assert view["mitigationStrategies"] == []
        assert view["expectedOutcomes"] is None
        assert view["context"] == {}

    def test_missing_optional_fields(self):
        view = normalize_decision_data(
            {
                "case_id": "case_123",
                "document_id": "doc_123",
                "decision_title": "Test Decision",
                "rationale": ["Reason 1"],
                "confidence_score": 0.8,
            }
        )
        assert view["caseId"] == "case_123"
        assert view["rationale"] == ["Reason 1"]
        assert view["decisionMakerRole"] is None
        assert view["risksIdentified"] == []
        assert view["mitigationStrategies"] == []
        assert view["expectedOutcomes"] is None
        assert view["context"] == {}

    def test_empty_lists_stay_empty(self):
        view = normalize_decision_data({"rationale": [], "risks_identified": [], "mitigation_strategies": []})
        assert view["rationale"] == []
        assert view["risksIdentified"] == []
        assert view["mitigationStrategies"] == []

    def test_non_list_sequence_degrades_to_empty(self):
        view = normalize_decision_data({"rationale": "single reason", "risks_identified": {"a": 1}})
        assert view["rationale"] == []
        assert view["risksIdentified"] == []

    def test_non_object_nested_fields_use_defaults(self):
        view = normalize_decision_data({"context": "n/a", "expected_outcomes": ["x"]})
        assert view["context"] == {}
        assert view["expectedOutcomes"] is None

    def test_falsy_scalars_are_kept(self):
        view = normalize_decision_data({"decision_title": "", "confidence_score": 0})
        assert view["decisionTitle"] == ""
        assert view["confidenceScore"] == 0


class TestConfidenceScore:
    def test_numeric_string_is_coerced(self):
        assert normalize_decision_data({"confidence_score": "0.75"})["confidenceScore"] == 0.75

    def test_integer_passes_through(self):
        assert normalize_decision_data({"confidenceScore": 1})["confidenceScore"] == 1

    def test_non_numeric_string_defaults(self):
        assert normalize_decision_data({"confidence_score": "high"})["confidenceScore"] is None

    def test_boolean_is_not_a_number(self):
        assert normalize_decision_data({"confidence_score": True})["confidenceScore"] is None

    def test_non_finite_defaults(self):
        assert normalize_decision_data({"confidence_score": "nan"})["confidenceScore"] is None
        assert normalize_decision_data({"confidence_score": float("inf")})["confidenceScore"] is None


class TestTotality:
    def test_non_object_inputs_give_defaults(self):
        expected = normalize_decision_data({})
        for raw in (None, [], [1, 2], "text", 42, 3.5, True, [{"case_id": "x"}]):
            assert normalize_decision_data(raw) == expected

    def test_deeply_nested_mixed_casing(self):
        nested: dict = {"leaf_value": 1}
        for depth in range(50):
            nested = {"child_node": [nested, {"siblingKey": depth, "sibling_depth": depth}]}
        view = normalize_decision_data({"context": nested})
        node = view["context"]
        for depth in reversed(range(50)):
            assert node["childNode"][1] == {"siblingKey": depth, "siblingDepth": depth}
            node = node["childNode"][0]
        assert node == {"leafValue": 1}

    def test_idempotent(self, snake_case_data: dict):
        once = normalize_decision_data(snake_case_data)
        twice = normalize_decision_data(once)
        assert twice == once

    def test_deterministic(self, snake_case_data: dict):
        first = json.dumps(normalize_decision_data(snake_case_data))
        second = json.dumps(normalize_decision_data(snake_case_data))
        assert first == second


class TestStep2Response:
    def test_descends_into_data(self, step2_envelope: dict, snake_case_data: dict):
        assert normalize_step2_response(step2_envelope) == normalize_decision_data(snake_case_data)

    def test_missing_data_gives_defaults(self):
        assert normalize_step2_response({"step": 2, "status": "error"}) == normalize_decision_data({})

    def test_non_object_data_gives_defaults(self):
        assert normalize_step2_response({"step": 2, "data": "oops"}) == normalize_decision_data({})

    def test_non_object_envelope_gives_defaults(self):
        assert normalize_step2_response(None) == normalize_decision_data({})
        assert normalize_step2_response([1, 2]) == normalize_decision_data({})
