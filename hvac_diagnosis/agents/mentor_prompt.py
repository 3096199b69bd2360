"""AI 멘토 프롬프트 구성

진단이 끝난 결과만 받아 외부 텍스트 생성 서비스에 넘길 페이로드와 프롬프트를 만든다.
응답 생성(네트워크 호출)은 이 모듈의 범위가 아니다.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from hvac_diagnosis.core.diagnostic_pipeline import DiagnosticRun
from hvac_diagnosis.utils.report import format_number
import logging

logger = logging.getLogger(__name__)

SECTION_SEPARATOR = "@@@"


@dataclass
class MentorResponse:
    """멘토 응답 (작업 지시 / 원리 설명)"""
    instructions: str
    explanation: str

    @property
    def has_explanation(self) -> bool:
        return bool(self.explanation)


class MentorPromptBuilder:
    """냉동공조 명장 멘토 프롬프트 빌더"""

    def get_system_prompt(self) -> str:
        return """당신은 25년 경력의 냉동공조 명장입니다.

전문성:
- 게이지 압력과 배관 온도로 냉동 사이클 상태 판단
- 신입 기술자 눈높이에 맞춘 작업 지시
- 안전을 최우선으로 고려

응답은 현장에서 바로 실행 가능한 형태로 작성하세요."""

    def build_payload(self, run: DiagnosticRun) -> Dict[str, Any]:
        measurement = run.measurement
        metrics = run.metrics
        diagnosis = run.diagnosis

        return {
            "facility_type": measurement.facility_type,
            "refrigerant": measurement.refrigerant,
            "ambient_temp": measurement.ambient_temp,
            "low_pressure": measurement.low_pressure,
            "high_pressure": measurement.high_pressure,
            "low_p_range": list(run.standard.low_p_range),
            "target_high_p": run.target_high_p,
            "evap_temp": metrics.evap_temp,
            "cond_temp": metrics.cond_temp,
            "superheat": metrics.superheat,
            "compression_ratio": metrics.compression_ratio,
            "symptoms": list(measurement.symptoms),
            "issues": list(diagnosis.issues),
            "severity": diagnosis.severity.value,
            "pattern_label": diagnosis.pattern_label,
        }

    def build_prompt(self, payload: Dict[str, Any]) -> str:
        low_min, low_max = payload["low_p_range"]
        symptoms: List[str] = payload.get("symptoms") or []
        issues: List[str] = payload.get("issues") or []

        return f"""25년 경력 냉동공조 명장입니다.

[설비] {payload['facility_type']}, {payload['refrigerant']}, 외기 {format_number(payload['ambient_temp'])}°C
[측정] 저압 {format_number(payload['low_pressure'])}kg (정상 {format_number(low_min)}~{format_number(low_max)}), 고압 {format_number(payload['high_pressure'])}kg (목표 {format_number(payload['target_high_p'])})
[상태] 증발 {payload['evap_temp']:.1f}°C, 응축 {payload['cond_temp']:.1f}°C, 과열도 {format_number(payload.get('superheat'))}, 압축비 {format_number(payload['compression_ratio'])}
[증상] {', '.join(symptoms) if symptoms else '없음'}
[진단] {', '.join(issues)}

신입 기술자에게 작업 지시와 원리 설명을 해주세요. '{SECTION_SEPARATOR}'로 구분:
[Part 1: 작업 지시] 간결하게
{SECTION_SEPARATOR}
[Part 2: 원리 설명] 친절하게"""

    def build_run_prompt(self, run: DiagnosticRun) -> str:
        return self.build_prompt(self.build_payload(run))


def split_mentor_response(text: Optional[str]) -> MentorResponse:
    """응답을 첫 구분자 기준으로 작업 지시 / 원리 설명으로 분리"""
    if not text:
        return MentorResponse(instructions="", explanation="")

    if SECTION_SEPARATOR not in text:
        logger.debug("멘토 응답에 구분자가 없어 전체를 작업 지시로 처리")
        return MentorResponse(instructions=text.strip(), explanation="")

    instructions, explanation = text.split(SECTION_SEPARATOR, 1)
    return MentorResponse(instructions=instructions.strip(), explanation=explanation.strip())


# 전역 인스턴스
mentor_prompt_builder = MentorPromptBuilder()
