from datetime import date, datetime

import pytest

from hvac_diagnosis.config.fault_patterns import FAULT_PATTERNS
from hvac_diagnosis.models.diagnosis_models import Measurement
from hvac_diagnosis.utils.report import (
    DISCLAIMER,
    format_number,
    format_signed,
    generate_report_text,
    render_run_report,
    report_filename
)

GENERATED_AT = datetime(2026, 10, 19, 9, 30, 0)


@pytest.fixture
def report(classifier, r22_standard):
    def _report(low_p, high_p, **kwargs):
        diagnosis = classifier.classify("R-22", low_p, high_p, r22_standard, 16.6)
        return generate_report_text(
            diagnosis, "R-22", "냉장 (0°C)", low_p, high_p, 16.6, r22_standard,
            fault_pattern=classifier.pattern(diagnosis.pattern_key),
            generated_at=GENERATED_AT,
            **kwargs
        )
    return _report


class TestFormatting:
    def test_format_number(self):
        assert format_number(2.0) == "2"
        assert format_number(16.6) == "16.6"
        assert format_number(1.25) == "1.25"
        assert format_number(10.0) == "10"
        assert format_number(None) == "-"
        assert format_number(-0.0) == "0"

    def test_format_number_keeps_measured_precision(self):
        assert format_number(1.234) == "1.234"
        assert format_number(-0.001) == "-0.001"
        assert format_number(12) == "12"

    def test_format_signed(self):
        assert format_signed(0.5) == "+0.5"
        assert format_signed(-4.6) == "-4.6"
        assert format_signed(0.0) == "0"


class TestGenerateReportText:
    def test_normal_report(self, report):
        lines = report(2.0, 12.0).splitlines()

        assert "생성일시: 2026-10-19 09:30:00" in lines
        assert "• 냉매: R-22" in lines
        assert "• 용도: 냉장 (0°C)" in lines
        assert "• 정상 저압 범위: 1.9 ~ 2.1 kg/cm²G" in lines
        assert "• 저압: 2 kg/cm²G (목표: 2 kg)" in lines
        assert "• 고압: 12 kg/cm²G (목표: 16.6 kg)" in lines
        assert "• 과열도: -°C" in lines
        assert "• 과냉도: -°C" in lines
        assert "• 상태: 정상" in lines
        assert "• 저압 편차: 0 kg" in lines
        assert "• 고압 편차: -4.6 kg" in lines
        assert "  ✅ 시스템 정상" in lines
        assert "  정기 점검 주기 준수" in lines
        assert "[주의사항]" not in lines
        assert DISCLAIMER in lines

    def test_section_order(self, report):
        text = report(2.0, 12.0)
        headings = ["[설비 정보]", "[측정값]", "[진단 결과]", "[발견된 문제]", "[권장 조치사항]"]

        positions = [text.index(heading) for heading in headings]
        assert positions == sorted(positions)

    def test_fault_report_has_caution(self, report):
        text = report(2.5, 21.0, superheat=6.5, subcooling=4.0)
        lines = text.splitlines()

        assert "• 상태: 위험" in lines
        assert "• 저압 편차: +0.5 kg" in lines
        assert "• 고압 편차: +4.4 kg" in lines
        assert "• 과열도: 6.5°C" in lines
        assert "• 과냉도: 4°C" in lines
        assert "  🔴 응축 불량" in lines
        assert "[주의사항]" in lines
        assert f"  {FAULT_PATTERNS['high_high']['caution']}" in lines
        assert text.index("[권장 조치사항]") < text.index("[주의사항]") < text.index(DISCLAIMER)

    def test_run_report(self, pipeline):
        run = pipeline.run(Measurement(low_pressure=1.0, high_pressure=8.0, suction_temp=0.0))
        text = render_run_report(run)

        assert "  🔴 냉매 부족 (Undercharge)" in text
        assert "• 과열도: " in text
        assert run.fault_pattern.caution in text
        assert run.created_at.strftime("%Y-%m-%d %H:%M:%S") in text


    def test_measured_pressures_not_rounded(self, report):
        text = report(1.975, 12.345)

        assert "• 저압: 1.975 kg/cm²G (목표: 2 kg)" in text
        assert "• 고압: 12.345 kg/cm²G (목표: 16.6 kg)" in text


class TestReportFilename:
    def test_filename(self):
        assert report_filename(date(2026, 10, 19)) == "hvac_report_2026-10-19.txt"

    def test_default_today(self):
        assert report_filename() == f"hvac_report_{date.today().isoformat()}.txt"
