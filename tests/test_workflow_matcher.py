import pytest
from pydantic import ValidationError

from hvac_diagnosis.config.workflows import DIFFICULTY_LABELS, WORKFLOW_RECOMMENDATIONS
from hvac_diagnosis.core.workflow_matcher import WorkflowMatcher, workflow_for
from hvac_diagnosis.models.diagnosis_models import WorkflowRecommendation


class TestWorkflowMatcher:
    def test_single_symptom(self):
        workflow = workflow_for(["ice-buildup"])

        assert workflow.difficulty == "medium"
        assert "excessive-frost" in workflow.symptom_ids
        assert workflow.estimated_duration.min == 45
        assert workflow.estimated_duration.max == 120

    def test_first_match_in_table_order(self):
        workflow = workflow_for(["strange-noise", "no-power"])

        assert workflow.symptom_ids == ["no-power"]

    def test_no_match(self):
        assert workflow_for([]) is None
        assert workflow_for(["unknown-symptom"]) is None

    def test_check_sequence_ordered(self):
        workflow = workflow_for(["temp-not-cooling"])
        orders = [step.order for step in workflow.check_sequence]

        assert orders == sorted(orders)
        assert workflow.check_sequence[0].caution_note == "전기 작업 시 안전 주의"
        assert workflow.check_sequence[1].caution_note is None

    def test_injected_table(self):
        matcher = WorkflowMatcher([{
            "symptom_ids": ["a"],
            "required_tools": [],
            "optional_parts": [],
            "check_sequence": [],
            "estimated_duration": {"min": 1, "max": 2},
            "difficulty": "hard"
        }])

        assert matcher.workflow_for({"a", "b"}).difficulty == "hard"
        assert matcher.workflow_for({"b"}) is None


class TestWorkflowData:
    def test_every_entry_valid(self):
        for entry in WORKFLOW_RECOMMENDATIONS:
            workflow = WorkflowRecommendation(**entry)
            assert workflow.difficulty in DIFFICULTY_LABELS
            assert workflow.estimated_duration.min <= workflow.estimated_duration.max

    def test_unknown_difficulty_rejected(self):
        entry = dict(WORKFLOW_RECOMMENDATIONS[0], difficulty="trivial")

        with pytest.raises(ValidationError):
            WorkflowRecommendation(**entry)
