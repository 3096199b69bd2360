"""파생 지표 계산 - 증발/응축 온도, 과열도, 과냉도, 압축비"""

import math
from typing import Optional

from hvac_diagnosis.config.constants import (
    ATMOSPHERIC_OFFSET,
    COMPRESSION_RATIO_SENTINEL,
    MIN_ABSOLUTE_LOW_PRESSURE
)
from hvac_diagnosis.core.pt_chart import PTChart, RefrigerantLike, get_pt_chart, temperature_at
from hvac_diagnosis.models.diagnosis_models import DerivedMetrics


def round1(value: float) -> float:
    """소수 첫째 자리 반올림 (half-up)"""
    return math.floor(value * 10 + 0.5) / 10


def round2(value: float) -> float:
    """소수 둘째 자리 반올림 (half-up)"""
    return math.floor(value * 100 + 0.5) / 100


def compression_ratio(low_pressure: float, high_pressure: float) -> float:
    """절대압 기준 압축비. 저압 절대압이 0.1 이하이면 99.9 반환"""
    abs_low = low_pressure + ATMOSPHERIC_OFFSET
    abs_high = high_pressure + ATMOSPHERIC_OFFSET
    if abs_low <= MIN_ABSOLUTE_LOW_PRESSURE:
        return COMPRESSION_RATIO_SENTINEL
    return round1(abs_high / abs_low)


def superheat(refrigerant: RefrigerantLike, low_pressure: float, suction_temp: float,
              chart: Optional[PTChart] = None, strict: Optional[bool] = None) -> float:
    """과열도 = 흡입관 온도 - 증발온도"""
    evap_temp = temperature_at(refrigerant, low_pressure, chart=chart, strict=strict)
    return round1(suction_temp - evap_temp)


def subcooling(refrigerant: RefrigerantLike, high_pressure: float, liquid_temp: float,
               chart: Optional[PTChart] = None, strict: Optional[bool] = None) -> float:
    """과냉도 = 응축온도 - 액관 온도"""
    cond_temp = temperature_at(refrigerant, high_pressure, chart=chart, strict=strict)
    return round1(cond_temp - liquid_temp)


class DerivedMetricsCalculator:
    def __init__(self, chart: Optional[PTChart] = None):
        self.chart = chart or get_pt_chart()

    def calculate(
        self,
        refrigerant: RefrigerantLike,
        low_pressure: float,
        high_pressure: float,
        suction_temp: Optional[float] = None,
        liquid_temp: Optional[float] = None,
        strict: Optional[bool] = None
    ) -> DerivedMetrics:
        evap_temp = self.chart.temperature_at(refrigerant, low_pressure, strict)
        cond_temp = self.chart.temperature_at(refrigerant, high_pressure, strict)

        # 과열도/과냉도는 반올림 전 포화온도로 계산
        sh = round1(suction_temp - evap_temp) if suction_temp is not None else None
        sc = round1(cond_temp - liquid_temp) if liquid_temp is not None else None

        return DerivedMetrics(
            evap_temp=round1(evap_temp),
            cond_temp=round1(cond_temp),
            superheat=sh,
            subcooling=sc,
            compression_ratio=compression_ratio(low_pressure, high_pressure)
        )


def derived_metrics(refrigerant: RefrigerantLike, low_pressure: float, high_pressure: float,
                    suction_temp: Optional[float] = None, liquid_temp: Optional[float] = None,
                    chart: Optional[PTChart] = None, strict: Optional[bool] = None) -> DerivedMetrics:
    return DerivedMetricsCalculator(chart).calculate(
        refrigerant, low_pressure, high_pressure, suction_temp, liquid_temp, strict
    )
