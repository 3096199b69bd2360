import math
import re
import html
import bleach
from typing import Dict, Any, List, Optional
from dataclasses import dataclass

from hvac_diagnosis.config.constants import ATMOSPHERIC_OFFSET
from hvac_diagnosis.config.fault_patterns import SYMPTOM_OPTIONS
from hvac_diagnosis.core.exceptions import DiagnosisError
from hvac_diagnosis.core.pt_chart import PTChart, get_pt_chart
from hvac_diagnosis.models.diagnosis_models import Measurement


class ValidationError(DiagnosisError):
    def __init__(self, message: str, field: str = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field


@dataclass
class ValidationResult:
    is_valid: bool
    errors: List[str]
    sanitized_data: Dict[str, Any]
    warnings: List[str]


class InputSanitizer:
    @staticmethod
    def sanitize_text(text: str, max_length: int = 500) -> str:
        if not isinstance(text, str):
            return ""

        # HTML 태그 제거
        clean_text = bleach.clean(text, tags=[], strip=True)

        # HTML 엔티티 디코딩
        clean_text = html.unescape(clean_text)

        # 길이 제한
        if len(clean_text) > max_length:
            clean_text = clean_text[:max_length] + "..."

        # 연속된 공백 정리
        clean_text = re.sub(r'\s+', ' ', clean_text).strip()

        return clean_text

    @staticmethod
    def sanitize_refrigerant(refrigerant: str) -> str:
        if not isinstance(refrigerant, str):
            return ""

        # 영숫자와 하이픈만 허용 (예: R-404A)
        clean = re.sub(r'[^a-zA-Z0-9\-]', '', refrigerant.strip())
        return clean[:20]


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


class MeasurementValidator:
    REQUIRED_FIELDS = ['low_pressure', 'high_pressure']
    OPTIONAL_NUMBER_FIELDS = ['ambient_temp', 'suction_temp', 'liquid_temp']

    def __init__(self, chart: Optional[PTChart] = None, strict: Optional[bool] = None):
        self.sanitizer = InputSanitizer()
        self.chart = chart or get_pt_chart()
        self.strict = self.chart.strict if strict is None else strict

    def _flag(self, message: str, errors: List[str], warnings: List[str]):
        # 엄격 모드에서는 경고도 오류로 취급
        if self.strict:
            errors.append(message)
        else:
            warnings.append(message)

    def validate_measurement(self, data: Dict[str, Any]) -> ValidationResult:
        errors = []
        warnings = []
        sanitized_data = {}

        # 냉매 검증
        refrigerant = data.get('refrigerant')
        if refrigerant is not None:
            if not isinstance(refrigerant, str):
                errors.append("냉매는 문자열이어야 합니다")
            else:
                refrigerant = self.sanitizer.sanitize_refrigerant(refrigerant)
                if not self.chart.is_known(refrigerant):
                    self._flag(f"지원하지 않는 냉매입니다: {refrigerant}", errors, warnings)
                sanitized_data['refrigerant'] = refrigerant

        # 용도 라벨
        facility_type = data.get('facility_type')
        if facility_type is not None:
            if not isinstance(facility_type, str):
                errors.append("용도는 문자열이어야 합니다")
            else:
                sanitized_data['facility_type'] = self.sanitizer.sanitize_text(facility_type, 100)

        # 압력 검증 (필수)
        for field_name in self.REQUIRED_FIELDS:
            if data.get(field_name) is None:
                errors.append(f"필수 필드 누락: {field_name}")
                continue

            value = _as_number(data[field_name])
            if value is None:
                errors.append(f"{field_name} 는 숫자여야 합니다")
            elif not math.isfinite(value):
                errors.append(f"{field_name} 는 유한한 값이어야 합니다")
            elif value < -ATMOSPHERIC_OFFSET:
                errors.append(f"{field_name} 가 완전 진공(-{ATMOSPHERIC_OFFSET}kg)보다 낮습니다: {value}")
            else:
                sanitized_data[field_name] = value

        # 온도 검증 (선택)
        for field_name in self.OPTIONAL_NUMBER_FIELDS:
            if data.get(field_name) is None:
                continue

            value = _as_number(data[field_name])
            if value is None:
                errors.append(f"{field_name} 는 숫자여야 합니다")
            elif not math.isfinite(value):
                errors.append(f"{field_name} 는 유한한 값이어야 합니다")
            else:
                sanitized_data[field_name] = value

        # P-T 표 범위 확인
        table = self.chart.table_for(sanitized_data.get('refrigerant', self.chart.default_refrigerant),
                                     strict=False)
        for field_name in self.REQUIRED_FIELDS:
            value = sanitized_data.get(field_name)
            if value is not None and not table.covers_pressure(value):
                lower, upper = table.pressure_bounds
                self._flag(
                    f"{field_name} {value}kg 이 {table.refrigerant} P-T 표 범위({lower}~{upper}) 밖입니다",
                    errors, warnings
                )

        # 증상 검증
        symptoms = data.get('symptoms') or []
        if not isinstance(symptoms, (list, tuple, set, frozenset)):
            errors.append("증상은 목록이어야 합니다")
        else:
            clean_symptoms = []
            for symptom in symptoms:
                value = getattr(symptom, 'value', symptom)
                clean = self.sanitizer.sanitize_text(value, 50) if isinstance(value, str) else ""
                if not clean:
                    warnings.append("빈 증상 항목은 무시됩니다")
                    continue
                if clean not in SYMPTOM_OPTIONS:
                    warnings.append(f"체크리스트에 없는 증상입니다: {clean}")
                clean_symptoms.append(clean)
            sanitized_data['symptoms'] = clean_symptoms

        # 메모 (선택)
        note = data.get('note')
        if note:
            if not isinstance(note, str):
                errors.append("메모는 문자열이어야 합니다")
            else:
                if len(note) > 2000:
                    warnings.append("메모가 매우 깁니다")
                sanitized_data['note'] = self.sanitizer.sanitize_text(note, 2000)

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            sanitized_data=sanitized_data,
            warnings=warnings
        )

    @staticmethod
    def require_valid(result: ValidationResult) -> Dict[str, Any]:
        if not result.is_valid:
            raise ValidationError(result.errors[0])
        return result.sanitized_data

    def to_measurement(self, data: Dict[str, Any]) -> Measurement:
        """검증 후 Measurement 생성 (실패 시 ValidationError)"""
        sanitized = self.require_valid(self.validate_measurement(data))
        return Measurement(**sanitized)
