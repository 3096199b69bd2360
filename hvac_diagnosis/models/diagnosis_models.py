"""진단 입출력 모델 (pydantic)"""

import math
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from hvac_diagnosis.config.constants import ATMOSPHERIC_OFFSET
from hvac_diagnosis.config.fault_patterns import PATTERN_LABELS


class Refrigerant(str, Enum):
    R22 = "R-22"
    R404A = "R-404A"
    R134A = "R-134a"


class ApplicationClass(str, Enum):
    """용도 분류"""
    REFRIGERATED = "냉장"
    FROZEN = "냉동"
    ULTRA_LOW = "초저온"


class Severity(str, Enum):
    """진단 심각도 (정상 < 주의 < 경고 < 위험)"""
    NORMAL = "정상"
    CAUTION = "주의"
    WARNING = "경고"
    CRITICAL = "위험"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANKS[self]

    @property
    def emoji(self) -> str:
        return _SEVERITY_EMOJI[self]


_SEVERITY_RANKS = {
    Severity.NORMAL: 0,
    Severity.CAUTION: 1,
    Severity.WARNING: 2,
    Severity.CRITICAL: 3,
}

_SEVERITY_EMOJI = {
    Severity.NORMAL: "🟢",
    Severity.CAUTION: "🟡",
    Severity.WARNING: "🟠",
    Severity.CRITICAL: "🔴",
}


def max_severity(current: Severity, candidate: Optional[Severity]) -> Severity:
    """두 심각도 중 높은 쪽. candidate 가 None 이면 current 유지"""
    if candidate is None or candidate.rank <= current.rank:
        return current
    return candidate


class PatternKey(str, Enum):
    """고장 패턴 식별자 (표시명은 PATTERN_LABELS)"""
    LOW_LOW = "low_low"
    LOW_NORMAL = "low_normal"
    HIGH_HIGH = "high_high"
    HIGH_LOW = "high_low"
    LOW_SUPERHEAT = "low_superheat"
    HIGH_SUPERHEAT = "high_superheat"
    HUNTING = "hunting"
    COMPRESSOR_NOISE = "compressor_noise"

    @property
    def label(self) -> str:
        return PATTERN_LABELS.get(self.value, self.value)


class Symptom(str, Enum):
    """게이지 점검 체크리스트 증상"""
    HUNTING = "헌팅"
    PIPE_FROST = "배관 성에"
    SIGHT_GLASS_BUBBLES = "액면계 거품"
    COMPRESSOR_NOISE = "압축기 소음"


class Direction(str, Enum):
    TEMP_TO_PRESS = "temp_to_press"
    PRESS_TO_TEMP = "press_to_temp"


class FieldStandard(BaseModel):
    """현장 운전 기준 (냉매 × 용도)"""
    model_config = ConfigDict(frozen=True)

    storage_temp: float
    evap_temp: float
    low_p_range: Tuple[float, float]
    low_p_target: float

    @model_validator(mode="after")
    def check_target_within_range(self) -> "FieldStandard":
        low_min, low_max = self.low_p_range
        if not low_min <= self.low_p_target <= low_max:
            raise ValueError(
                f"저압 목표 {self.low_p_target} 가 범위 {low_min}~{low_max} 를 벗어났습니다"
            )
        return self

    @property
    def low_p_min(self) -> float:
        return self.low_p_range[0]

    @property
    def low_p_max(self) -> float:
        return self.low_p_range[1]


class CondensingTarget(BaseModel):
    """외기온도 기반 고압 목표"""
    model_config = ConfigDict(frozen=True)

    target_high_p: float
    target_cond_temp: float


class RefrigerantInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    oil: str
    note: str
    charge_method: str


class Measurement(BaseModel):
    """기술자 측정값 (1회 진단 단위)"""

    refrigerant: str = Refrigerant.R22.value
    facility_type: str = "냉장 (0°C)"
    ambient_temp: float = Field(default=30.0, allow_inf_nan=False)

    # 게이지압 (kg/cm²G) - 절대압이 음수일 수는 없음
    low_pressure: float = Field(..., ge=-ATMOSPHERIC_OFFSET, allow_inf_nan=False)
    high_pressure: float = Field(..., ge=-ATMOSPHERIC_OFFSET, allow_inf_nan=False)

    suction_temp: Optional[float] = Field(default=None, allow_inf_nan=False)
    liquid_temp: Optional[float] = Field(default=None, allow_inf_nan=False)

    symptoms: List[str] = Field(default_factory=list)
    note: Optional[str] = None

    @field_validator("refrigerant", mode="before")
    @classmethod
    def coerce_refrigerant(cls, value):
        if isinstance(value, Refrigerant):
            return value.value
        return value

    @field_validator("symptoms", mode="before")
    @classmethod
    def coerce_symptoms(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            raise ValueError("증상은 목록으로 입력해야 합니다")
        return [s.value if isinstance(s, Symptom) else s for s in value]

    @property
    def has_pipe_temps(self) -> bool:
        return self.suction_temp is not None or self.liquid_temp is not None


class DerivedMetrics(BaseModel):
    """측정 압력/배관 온도로부터 계산한 파생 지표"""
    model_config = ConfigDict(frozen=True)

    evap_temp: float
    cond_temp: float
    superheat: Optional[float] = None
    subcooling: Optional[float] = None
    compression_ratio: float

    @field_validator("evap_temp", "cond_temp", "compression_ratio")
    @classmethod
    def check_finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("파생 지표는 유한한 값이어야 합니다")
        return value


class FaultPattern(BaseModel):
    """고장 패턴 사전 항목"""
    model_config = ConfigDict(frozen=True)

    causes: List[str]
    symptoms: List[str]
    actions: List[str]
    caution: str


class DiagnosisResult(BaseModel):
    """분류기 출력 - 리포트/AI 멘토로 전달되는 유일한 산출물"""
    model_config = ConfigDict(frozen=True)

    issues: List[str]
    actions: List[str]
    severity: Severity
    pattern_key: Optional[PatternKey] = None
    diff_low: float
    diff_high: float
    low_range: Tuple[float, float]
    low_target: float

    @property
    def pattern_label(self) -> Optional[str]:
        if self.pattern_key is None:
            return None
        return self.pattern_key.label

    @property
    def is_normal(self) -> bool:
        return self.severity == Severity.NORMAL and self.pattern_key is None


class CheckStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    order: int
    title: str
    description: str
    caution_note: Optional[str] = None


class DurationRange(BaseModel):
    """예상 소요시간 (분)"""
    model_config = ConfigDict(frozen=True)

    min: int
    max: int


class WorkflowRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    symptom_ids: List[str]
    required_tools: List[str]
    optional_parts: List[str]
    check_sequence: List[CheckStep]
    estimated_duration: DurationRange
    difficulty: str = Field(pattern=r"^(easy|medium|hard|expert)$")


class Urgency(str, Enum):
    """고객 자가 진단 긴급도 (증상 심각도와 같은 4단계)"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _URGENCY_RANKS[self]


_URGENCY_RANKS = {
    Urgency.LOW: 1,
    Urgency.MEDIUM: 2,
    Urgency.HIGH: 3,
    Urgency.CRITICAL: 4,
}


class DiagnosisKind(str, Enum):
    """최선(min) / 최악(max) 시나리오"""
    MIN = "min"
    MAX = "max"


class CustomerSymptom(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    category_id: str
    name: str
    description: str
    severity: Urgency


class DetailQuestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    symptom_id: str
    question: str
    type: str = Field(pattern=r"^(single|multiple)$")
    values: List[str]


class CustomerDiagnosis(BaseModel):
    """고객 자가 진단 결과"""
    model_config = ConfigDict(frozen=True)

    cause: str
    action: str
    estimated_time: str
    urgency: Urgency
    self_fixable: bool
