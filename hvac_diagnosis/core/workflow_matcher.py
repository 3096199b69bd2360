"""증상 ID → 권장 점검 워크플로우 (첫 번째 일치 항목)"""

from typing import Any, Iterable, List, Mapping, Optional, Sequence

from hvac_diagnosis.config.workflows import WORKFLOW_RECOMMENDATIONS
from hvac_diagnosis.models.diagnosis_models import WorkflowRecommendation


class WorkflowMatcher:
    def __init__(self, recommendations: Sequence[Mapping[str, Any]] = WORKFLOW_RECOMMENDATIONS):
        self.recommendations: List[WorkflowRecommendation] = [
            WorkflowRecommendation(**entry) for entry in recommendations
        ]

    def workflow_for(self, symptom_ids: Iterable[str]) -> Optional[WorkflowRecommendation]:
        wanted = set(symptom_ids)
        for recommendation in self.recommendations:
            if wanted.intersection(recommendation.symptom_ids):
                return recommendation
        return None


workflow_matcher = WorkflowMatcher()


def workflow_for(symptom_ids: Iterable[str]) -> Optional[WorkflowRecommendation]:
    return workflow_matcher.workflow_for(symptom_ids)
