"""
Customer Self-Diagnosis
=======================

고객이 선택한 증상과 세부 질문 답변으로 최선(min)/최악(max) 시나리오 판정을 만든다.

• 판정 규칙은 CUSTOMER_DIAGNOSIS_RULES 순서대로 평가되며 처음 일치한 규칙이 결과를 결정
• 일치하는 규칙이 없으면 기본 판정을 쓰고, max 쪽 긴급도는 선택 증상 심각도의 최댓값
"""

import logging
import secrets
from functools import reduce
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from hvac_diagnosis.config.customer_diagnosis import (
    CUSTOMER_DIAGNOSIS_RULES,
    DEFAULT_CUSTOMER_DIAGNOSIS,
    DETAIL_QUESTIONS,
    DIAGNOSIS_CODE_CHARS,
    DIAGNOSIS_CODE_LENGTH,
    SYMPTOM_CATEGORIES
)
from hvac_diagnosis.models.diagnosis_models import (
    CustomerDiagnosis,
    CustomerSymptom,
    DetailQuestion,
    DiagnosisKind,
    Urgency
)

logger = logging.getLogger(__name__)

Answers = Mapping[str, Sequence[str]]


def _require_collection(value: Any, name: str):
    # 문자열은 글자 단위로 순회되므로 목록으로 오인하지 않는다
    if isinstance(value, str):
        raise TypeError(f"{name} 는 문자열이 아닌 목록이어야 합니다: {value!r}")


class CustomerDiagnosisEngine:
    def __init__(
        self,
        categories: Sequence[Mapping[str, Any]] = SYMPTOM_CATEGORIES,
        questions: Sequence[Mapping[str, Any]] = DETAIL_QUESTIONS,
        rules: Sequence[Mapping[str, Any]] = CUSTOMER_DIAGNOSIS_RULES,
        defaults: Mapping[str, Mapping[str, Any]] = DEFAULT_CUSTOMER_DIAGNOSIS
    ):
        self.symptoms: Dict[str, CustomerSymptom] = {
            symptom["id"]: CustomerSymptom(category_id=category["id"], **symptom)
            for category in categories
            for symptom in category["symptoms"]
        }
        self.questions: List[DetailQuestion] = [DetailQuestion(**q) for q in questions]
        self.rules = list(rules)
        self.defaults = {
            DiagnosisKind(kind): CustomerDiagnosis(**result) for kind, result in defaults.items()
        }

    def symptom_by_id(self, symptom_id: str) -> Optional[CustomerSymptom]:
        return self.symptoms.get(symptom_id)

    def symptom_name(self, symptom_id: str) -> str:
        symptom = self.symptom_by_id(symptom_id)
        return symptom.name if symptom else symptom_id

    def questions_for(self, symptom_id: str) -> List[DetailQuestion]:
        return [q for q in self.questions if q.symptom_id == symptom_id]

    def max_urgency(self, symptom_ids: Iterable[str]) -> Urgency:
        """선택 증상 심각도의 최댓값 (알 수 없는 증상은 무시, 기본 low)"""
        def pick(current: Urgency, symptom_id: str) -> Urgency:
            symptom = self.symptom_by_id(symptom_id)
            if symptom is None or symptom.severity.rank <= current.rank:
                return current
            return symptom.severity

        return reduce(pick, symptom_ids, Urgency.LOW)

    @staticmethod
    def _rule_matches(rule: Mapping[str, Any], selected: List[str], answers: Answers) -> bool:
        if not any(symptom_id in selected for symptom_id in rule["symptom_ids"]):
            return False
        answer = answers.get(rule["question_id"]) or []
        if rule["match"] == "any":
            return any(value in answer for value in rule["values"])
        return bool(answer) and answer[0] in rule["values"]

    def diagnose(
        self,
        symptom_ids: Iterable[str],
        answers: Optional[Answers] = None,
        kind: Union[DiagnosisKind, str] = DiagnosisKind.MIN
    ) -> CustomerDiagnosis:
        _require_collection(symptom_ids, "symptom_ids")
        answers = answers or {}
        for question_id, answer in answers.items():
            _require_collection(answer, f"answers[{question_id!r}]")

        kind = DiagnosisKind(kind)
        selected = list(symptom_ids)

        for rule in self.rules:
            if self._rule_matches(rule, selected, answers):
                logger.debug(f"자가 진단 규칙 일치: {rule['question_id']} → {kind.value}")
                return CustomerDiagnosis(**rule[kind.value])

        result = self.defaults[kind]
        if kind == DiagnosisKind.MAX:
            result = result.model_copy(update={"urgency": self.max_urgency(selected)})
        return result

    def diagnose_range(self, symptom_ids: Iterable[str], answers: Optional[Answers] = None) -> Dict[str, CustomerDiagnosis]:
        _require_collection(symptom_ids, "symptom_ids")
        selected = list(symptom_ids)
        return {
            kind.value: self.diagnose(selected, answers, kind)
            for kind in (DiagnosisKind.MIN, DiagnosisKind.MAX)
        }


def generate_diagnosis_code(length: int = DIAGNOSIS_CODE_LENGTH) -> str:
    """접수 확인용 코드 (혼동되는 0/O, 1/I 제외)"""
    return "".join(secrets.choice(DIAGNOSIS_CODE_CHARS) for _ in range(length))


# 전역 인스턴스
customer_diagnosis_engine = CustomerDiagnosisEngine()


def customer_diagnosis(symptom_ids: Iterable[str], answers: Optional[Answers] = None,
                       kind: Union[DiagnosisKind, str] = DiagnosisKind.MIN) -> CustomerDiagnosis:
    return customer_diagnosis_engine.diagnose(symptom_ids, answers, kind)
