"""진단 엔진 예외 정의

기본 동작(관대 모드)에서는 어떤 예외도 발생하지 않는다.
엄격 모드(strict=True 또는 STRICT_MODE=true)에서만 아래 예외로 호출자에게 알린다.
"""

from typing import Optional


class DiagnosisError(Exception):
    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.error_code = error_code


class UnknownRefrigerantError(DiagnosisError):
    def __init__(self, refrigerant: str):
        super().__init__(f"지원하지 않는 냉매입니다: {refrigerant}", "UNKNOWN_REFRIGERANT")
        self.refrigerant = refrigerant


class OutOfRangeError(DiagnosisError):
    def __init__(self, refrigerant: str, value: float, lower: float, upper: float, quantity: str):
        super().__init__(
            f"{refrigerant} P-T 표 범위를 벗어난 {quantity}: {value} (허용 {lower} ~ {upper})",
            "OUT_OF_RANGE"
        )
        self.refrigerant = refrigerant
        self.value = value
        self.bounds = (lower, upper)
        self.quantity = quantity


class FieldStandardNotFoundError(DiagnosisError):
    def __init__(self, refrigerant: str, application: str):
        super().__init__(
            f"{refrigerant} / {application} 에 대한 현장 기준이 없습니다",
            "FIELD_STANDARD_NOT_FOUND"
        )
        self.refrigerant = refrigerant
        self.application = application
