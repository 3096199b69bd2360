"""텍스트 진단 리포트 생성"""

from datetime import date, datetime
from typing import Optional

from hvac_diagnosis.config.settings import REPORT_CONFIG
from hvac_diagnosis.core.diagnostic_pipeline import DiagnosticRun
from hvac_diagnosis.models.diagnosis_models import DiagnosisResult, FaultPattern, FieldStandard

RULE_HEAVY = "=" * 80
RULE_LIGHT = "-" * 80
DISCLAIMER = "※ 본 리포트는 참고용이며, 실제 작업은 자격을 갖춘 기술자가 수행해야 합니다."


def format_number(value: Optional[float]) -> str:
    """측정값 그대로 표기. 2.0 → '2', 1.234 → '1.234', None → '-'"""
    if value is None:
        return "-"
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return "0" if text == "-0" else text


def format_signed(value: float) -> str:
    return f"+{format_number(value)}" if value > 0 else format_number(value)


def generate_report_text(
    diagnosis: DiagnosisResult,
    refrigerant: str,
    facility_type: str,
    low_p: float,
    high_p: float,
    target_high_p: float,
    standard: FieldStandard,
    superheat: Optional[float] = None,
    subcooling: Optional[float] = None,
    fault_pattern: Optional[FaultPattern] = None,
    generated_at: Optional[datetime] = None
) -> str:
    generated_at = generated_at or datetime.now()
    low_min, low_max = standard.low_p_range

    lines = [
        RULE_HEAVY,
        REPORT_CONFIG['title'].center(80).rstrip(),
        RULE_HEAVY,
        f"생성일시: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}",
        RULE_LIGHT,
        "",
        "[설비 정보]",
        f"• 냉매: {refrigerant}",
        f"• 용도: {facility_type}",
        f"• 정상 저압 범위: {format_number(low_min)} ~ {format_number(low_max)} kg/cm²G",
        "",
        "[측정값]",
        f"• 저압: {format_number(low_p)} kg/cm²G (목표: {format_number(standard.low_p_target)} kg)",
        f"• 고압: {format_number(high_p)} kg/cm²G (목표: {format_number(target_high_p)} kg)",
        f"• 과열도: {format_number(superheat)}°C",
        f"• 과냉도: {format_number(subcooling)}°C",
        "",
        "[진단 결과]",
        f"• 상태: {diagnosis.severity.value}",
        f"• 저압 편차: {format_signed(diagnosis.diff_low)} kg",
        f"• 고압 편차: {format_signed(diagnosis.diff_high)} kg",
        "",
        "[발견된 문제]",
    ]
    lines.extend(f"  {issue}" for issue in diagnosis.issues)

    lines.append("")
    lines.append("[권장 조치사항]")
    lines.extend(f"  {action}" for action in diagnosis.actions)

    if fault_pattern is not None:
        lines.append("")
        lines.append("[주의사항]")
        lines.append(f"  {fault_pattern.caution}")

    lines.extend(["", RULE_LIGHT, DISCLAIMER, RULE_HEAVY])
    return "\n".join(lines) + "\n"


def render_run_report(run: DiagnosticRun) -> str:
    """DiagnosticRun 전체로 리포트 생성 (편의 함수)"""
    measurement = run.measurement
    return generate_report_text(
        run.diagnosis,
        measurement.refrigerant,
        measurement.facility_type,
        measurement.low_pressure,
        measurement.high_pressure,
        run.target_high_p,
        run.standard,
        superheat=run.metrics.superheat,
        subcooling=run.metrics.subcooling,
        fault_pattern=run.fault_pattern,
        generated_at=run.created_at
    )


def report_filename(day: Optional[date] = None) -> str:
    day = day or date.today()
    return f"hvac_report_{day.isoformat()}.txt"
