"""
P-T 차트 보간기
===============

• 냉매별 포화온도(°C) ↔ 포화압력(kg/cm²G) 표를 선형 보간으로 양방향 변환
• 표 범위 밖 입력은 외삽하지 않고 경계값으로 고정(clamp)
• 알 수 없는 냉매는 기본 냉매 표로 대체 (엄격 모드에서는 예외)

표 데이터는 생성 시 주입되며 이후 변경되지 않는다.
"""

import bisect
import logging
from typing import Dict, Mapping, Optional, Sequence, Tuple, Union

from hvac_diagnosis.config.pt_chart import PT_CHART
from hvac_diagnosis.config.settings import settings
from hvac_diagnosis.core.exceptions import OutOfRangeError, UnknownRefrigerantError
from hvac_diagnosis.models.diagnosis_models import Direction, Refrigerant

logger = logging.getLogger(__name__)

RefrigerantLike = Union[Refrigerant, str]


def refrigerant_id(refrigerant: RefrigerantLike) -> str:
    if isinstance(refrigerant, Refrigerant):
        return refrigerant.value
    return str(refrigerant)


def _interpolate(xs: Sequence[float], ys: Sequence[float], x: float) -> float:
    """xs 가 오름차순일 때 x 에 대한 y 를 선형 보간 (범위 밖은 경계값)"""
    if x <= xs[0]:
        return ys[0]
    if x >= xs[-1]:
        return ys[-1]

    i = bisect.bisect_right(xs, x)
    x0, x1 = xs[i - 1], xs[i]
    y0, y1 = ys[i - 1], ys[i]
    return y0 + (x - x0) / (x1 - x0) * (y1 - y0)


class PropertyTable:
    """냉매 1종의 포화 P-T 표"""

    def __init__(self, refrigerant: str, points: Mapping[float, float]):
        if len(points) < 2:
            raise ValueError(f"{refrigerant} P-T 표에는 최소 2개의 점이 필요합니다")

        temps = sorted(float(t) for t in points)
        pressures = [float(points[t]) for t in sorted(points)]

        for prev, curr in zip(pressures, pressures[1:]):
            if curr <= prev:
                raise ValueError(f"{refrigerant} P-T 표의 압력이 온도에 대해 단조 증가하지 않습니다")

        self.refrigerant = refrigerant
        self.temperatures: Tuple[float, ...] = tuple(temps)
        self.pressures: Tuple[float, ...] = tuple(pressures)

    @property
    def temperature_bounds(self) -> Tuple[float, float]:
        return self.temperatures[0], self.temperatures[-1]

    @property
    def pressure_bounds(self) -> Tuple[float, float]:
        return self.pressures[0], self.pressures[-1]

    def covers_temperature(self, temperature: float) -> bool:
        lower, upper = self.temperature_bounds
        return lower <= temperature <= upper

    def covers_pressure(self, pressure: float) -> bool:
        lower, upper = self.pressure_bounds
        return lower <= pressure <= upper

    def pressure_at(self, temperature: float) -> float:
        return _interpolate(self.temperatures, self.pressures, temperature)

    def temperature_at(self, pressure: float) -> float:
        return _interpolate(self.pressures, self.temperatures, pressure)

    def __repr__(self) -> str:
        lower, upper = self.temperature_bounds
        return f"PropertyTable({self.refrigerant!r}, {lower}~{upper}°C, {len(self.temperatures)} points)"


class PTChart:
    """냉매별 PropertyTable 모음"""

    def __init__(
        self,
        tables: Mapping[str, Mapping[float, float]],
        default_refrigerant: str = Refrigerant.R22.value,
        strict: bool = False
    ):
        if default_refrigerant not in tables:
            raise ValueError(f"기본 냉매 {default_refrigerant} 의 P-T 표가 없습니다")

        self._tables: Dict[str, PropertyTable] = {
            name: PropertyTable(name, points) for name, points in tables.items()
        }
        self.default_refrigerant = default_refrigerant
        self.strict = strict

    @property
    def refrigerants(self) -> Tuple[str, ...]:
        return tuple(self._tables)

    def is_known(self, refrigerant: RefrigerantLike) -> bool:
        return refrigerant_id(refrigerant) in self._tables

    def _is_strict(self, strict: Optional[bool]) -> bool:
        return self.strict if strict is None else strict

    def table_for(self, refrigerant: RefrigerantLike, strict: Optional[bool] = None) -> PropertyTable:
        name = refrigerant_id(refrigerant)
        table = self._tables.get(name)
        if table is not None:
            return table

        if self._is_strict(strict):
            raise UnknownRefrigerantError(name)

        logger.warning(f"알 수 없는 냉매 '{name}' - 기본 냉매 {self.default_refrigerant} 표 사용")
        return self._tables[self.default_refrigerant]

    def pressure_at(self, refrigerant: RefrigerantLike, temperature: float,
                    strict: Optional[bool] = None) -> float:
        """포화온도(°C) → 포화압력(kg/cm²G)"""
        table = self.table_for(refrigerant, strict)
        if not table.covers_temperature(temperature):
            lower, upper = table.temperature_bounds
            if self._is_strict(strict):
                raise OutOfRangeError(table.refrigerant, temperature, lower, upper, "온도")
            logger.debug(f"{table.refrigerant} 온도 {temperature}°C 가 표 범위({lower}~{upper}) 밖 - 경계값 사용")
        return table.pressure_at(temperature)

    def temperature_at(self, refrigerant: RefrigerantLike, pressure: float,
                       strict: Optional[bool] = None) -> float:
        """포화압력(kg/cm²G) → 포화온도(°C)"""
        table = self.table_for(refrigerant, strict)
        if not table.covers_pressure(pressure):
            lower, upper = table.pressure_bounds
            if self._is_strict(strict):
                raise OutOfRangeError(table.refrigerant, pressure, lower, upper, "압력")
            logger.debug(f"{table.refrigerant} 압력 {pressure}kg 이 표 범위({lower}~{upper}) 밖 - 경계값 사용")
        return table.temperature_at(pressure)

    def interpolate(self, refrigerant: RefrigerantLike, value: float,
                    direction: Union[Direction, str], strict: Optional[bool] = None) -> float:
        direction = Direction(direction)
        if direction is Direction.TEMP_TO_PRESS:
            return self.pressure_at(refrigerant, value, strict)
        return self.temperature_at(refrigerant, value, strict)


# 전역 인스턴스 (지연 초기화)
_default_chart: Optional[PTChart] = None


def get_pt_chart() -> PTChart:
    """설정값 기반 기본 P-T 차트 반환"""
    global _default_chart
    if _default_chart is None:
        _default_chart = PTChart(
            PT_CHART,
            default_refrigerant=settings.DEFAULT_REFRIGERANT,
            strict=settings.STRICT_MODE
        )
    return _default_chart


def interpolate(refrigerant: RefrigerantLike, value: float, direction: Union[Direction, str],
                chart: Optional[PTChart] = None, strict: Optional[bool] = None) -> float:
    return (chart or get_pt_chart()).interpolate(refrigerant, value, direction, strict)


def pressure_at(refrigerant: RefrigerantLike, temperature: float,
                chart: Optional[PTChart] = None, strict: Optional[bool] = None) -> float:
    return (chart or get_pt_chart()).pressure_at(refrigerant, temperature, strict)


def temperature_at(refrigerant: RefrigerantLike, pressure: float,
                   chart: Optional[PTChart] = None, strict: Optional[bool] = None) -> float:
    return (chart or get_pt_chart()).temperature_at(refrigerant, pressure, strict)
