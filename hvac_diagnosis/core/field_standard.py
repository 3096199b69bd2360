"""현장 기준 조회 - 냉매·용도 라벨 → 운전 기준, 외기온도 → 고압 목표"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from hvac_diagnosis.config.constants import CONDENSING_OFFSET
from hvac_diagnosis.config.field_standards import (
    DEFAULT_FIELD_STANDARD,
    FACILITY_OPTIONS,
    FIELD_STANDARDS
)
from hvac_diagnosis.config.pt_chart import REFRIGERANT_INFO
from hvac_diagnosis.core.exceptions import FieldStandardNotFoundError, UnknownRefrigerantError
from hvac_diagnosis.core.metrics import round1
from hvac_diagnosis.core.pt_chart import PTChart, RefrigerantLike, get_pt_chart, refrigerant_id
from hvac_diagnosis.models.diagnosis_models import (
    ApplicationClass,
    CondensingTarget,
    FieldStandard,
    RefrigerantInfo
)

logger = logging.getLogger(__name__)

# 라벨 부분 문자열 매칭 우선순위: 초저온 → 냉동 → 냉장(기본)
_APPLICATION_PRIORITY = (ApplicationClass.ULTRA_LOW, ApplicationClass.FROZEN)


class FieldStandardResolver:
    def __init__(
        self,
        standards: Mapping[str, Mapping[str, Mapping[str, Any]]] = FIELD_STANDARDS,
        chart: Optional[PTChart] = None,
        default_standard: Mapping[str, Any] = DEFAULT_FIELD_STANDARD,
        strict: Optional[bool] = None
    ):
        self.chart = chart or get_pt_chart()
        self.strict = self.chart.strict if strict is None else strict
        self.default_standard = FieldStandard(**default_standard)
        self._standards: Dict[str, Dict[ApplicationClass, FieldStandard]] = {
            refrigerant: {
                ApplicationClass(app_class): FieldStandard(**row)
                for app_class, row in rows.items()
            }
            for refrigerant, rows in standards.items()
        }

    @staticmethod
    def classify_application(label: str) -> ApplicationClass:
        for app_class in _APPLICATION_PRIORITY:
            if app_class.value in label:
                return app_class
        return ApplicationClass.REFRIGERATED

    def standard_for(self, refrigerant: RefrigerantLike, application_label: str,
                     strict: Optional[bool] = None) -> FieldStandard:
        strict = self.strict if strict is None else strict
        name = refrigerant_id(refrigerant)
        app_class = self.classify_application(application_label)

        rows = self._standards.get(name)
        if rows is None:
            if strict:
                raise UnknownRefrigerantError(name)
            logger.warning(f"'{name}' 냉매의 현장 기준 없음 - 기본 기준 사용")
            return self.default_standard

        standard = rows.get(app_class)
        if standard is None:
            if strict:
                raise FieldStandardNotFoundError(name, app_class.value)
            logger.warning(f"{name} / {app_class.value} 현장 기준 없음 - 기본 기준 사용")
            return self.default_standard

        return standard

    def target_condensing_pressure(self, refrigerant: RefrigerantLike, ambient_temp: float,
                                   strict: Optional[bool] = None) -> CondensingTarget:
        """응축온도 목표 = 외기 + 15°C, 이를 P-T 표로 압력 변환"""
        target_cond_temp = ambient_temp + CONDENSING_OFFSET
        target_high_p = self.chart.pressure_at(refrigerant, target_cond_temp, strict)
        return CondensingTarget(
            target_high_p=round1(target_high_p),
            target_cond_temp=round1(target_cond_temp)
        )

    @staticmethod
    def facility_options(refrigerant: RefrigerantLike) -> List[str]:
        name = refrigerant_id(refrigerant)
        return list(FACILITY_OPTIONS.get(name, FACILITY_OPTIONS["default"]))

    @staticmethod
    def refrigerant_info(refrigerant: RefrigerantLike) -> Optional[RefrigerantInfo]:
        info = REFRIGERANT_INFO.get(refrigerant_id(refrigerant))
        return RefrigerantInfo(**info) if info else None


# 전역 인스턴스 (지연 초기화)
_resolver: Optional[FieldStandardResolver] = None


def get_resolver() -> FieldStandardResolver:
    global _resolver
    if _resolver is None:
        _resolver = FieldStandardResolver()
    return _resolver


def field_standard(refrigerant: RefrigerantLike, application_label: str,
                   strict: Optional[bool] = None) -> FieldStandard:
    return get_resolver().standard_for(refrigerant, application_label, strict)


def target_condensing_pressure(refrigerant: RefrigerantLike, ambient_temp: float,
                               strict: Optional[bool] = None) -> CondensingTarget:
    return get_resolver().target_condensing_pressure(refrigerant, ambient_temp, strict)
