"""
HVAC 냉동 사이클 진단 - Command Line Interface

게이지 압력(저압/고압), 배관 온도, 증상 체크리스트를 받아 진단 리포트를 출력한다.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from hvac_diagnosis.agents.mentor_prompt import mentor_prompt_builder
from hvac_diagnosis.config.fault_patterns import SYMPTOM_OPTIONS
from hvac_diagnosis.config.settings import settings
from hvac_diagnosis.core.diagnostic_pipeline import DiagnosticRun, run_diagnosis
from hvac_diagnosis.core.exceptions import DiagnosisError
from hvac_diagnosis.models.diagnosis_models import Measurement, Refrigerant
from hvac_diagnosis.utils.logging_config import setup_logging
from hvac_diagnosis.utils.pdf_generator import generate_diagnosis_pdf
from hvac_diagnosis.utils.report import render_run_report
from hvac_diagnosis.utils.validators import MeasurementValidator

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DIAGNOSIS_ERROR = 1
EXIT_VALIDATION_ERROR = 2
EXIT_OUTPUT_ERROR = 3


def setup_argparse() -> argparse.ArgumentParser:
    """Setup command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="hvac-diagnose",
        description="냉동 사이클 게이지 진단 (P-T 차트 기반)"
    )

    parser.add_argument(
        "--refrigerant", "-r",
        type=str,
        default=settings.DEFAULT_REFRIGERANT,
        help=f"냉매 ({', '.join(r.value for r in Refrigerant)})"
    )
    parser.add_argument(
        "--facility", "-f",
        type=str,
        default=settings.DEFAULT_FACILITY_TYPE,
        help="용도 라벨 (예: '냉장 (0°C)', '냉동 (-20°C)', '초저온 (-35°C)')"
    )
    parser.add_argument(
        "--ambient", "-a",
        type=float,
        default=settings.DEFAULT_AMBIENT_TEMP,
        help="외기온도 (°C)"
    )
    parser.add_argument(
        "--low",
        type=float,
        required=True,
        help="저압 게이지 (kg/cm²G)"
    )
    parser.add_argument(
        "--high",
        type=float,
        required=True,
        help="고압 게이지 (kg/cm²G)"
    )
    parser.add_argument(
        "--suction-temp",
        type=float,
        default=None,
        help="흡입관 온도 (°C) - 과열도 계산"
    )
    parser.add_argument(
        "--liquid-temp",
        type=float,
        default=None,
        help="액관 온도 (°C) - 과냉도 계산"
    )
    parser.add_argument(
        "--symptom", "-s",
        action="append",
        default=[],
        dest="symptoms",
        help=f"관찰된 증상, 여러 번 지정 가능 ({', '.join(SYMPTOM_OPTIONS)})"
    )
    parser.add_argument(
        "--note",
        type=str,
        default=None,
        help="현장 메모"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="알 수 없는 냉매/표 범위 밖 입력을 오류로 처리"
    )
    parser.add_argument(
        "--pdf",
        type=Path,
        default=None,
        metavar="PATH",
        help="PDF 리포트 저장 경로"
    )
    parser.add_argument(
        "--mentor-prompt",
        action="store_true",
        help="AI 멘토용 프롬프트도 함께 출력"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="텍스트 리포트 대신 JSON 출력"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Logging level (기본값: LOG_LEVEL 설정)"
    )

    return parser


def measurement_data(args: argparse.Namespace) -> Dict[str, Any]:
    return {
        "refrigerant": args.refrigerant,
        "facility_type": args.facility,
        "ambient_temp": args.ambient,
        "low_pressure": args.low,
        "high_pressure": args.high,
        "suction_temp": args.suction_temp,
        "liquid_temp": args.liquid_temp,
        "symptoms": args.symptoms,
        "note": args.note,
    }


def print_run(run: DiagnosticRun, as_json: bool, with_mentor_prompt: bool):
    if as_json:
        output = run.to_dict()
        if with_mentor_prompt:
            output["mentor_prompt"] = mentor_prompt_builder.build_run_prompt(run)
        print(json.dumps(output, ensure_ascii=False, indent=2))
        return

    print(render_run_report(run))
    if with_mentor_prompt:
        print(mentor_prompt_builder.build_run_prompt(run))


def main(argv: Optional[List[str]] = None) -> int:
    parser = setup_argparse()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    strict = True if args.strict else None

    validator = MeasurementValidator(strict=strict)
    result = validator.validate_measurement(measurement_data(args))
    for warning in result.warnings:
        logger.warning(warning)

    if not result.is_valid:
        for error in result.errors:
            print(f"❌ {error}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        measurement = Measurement(**result.sanitized_data)
    except PydanticValidationError as e:
        print(f"❌ 측정값 오류: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        run = run_diagnosis(measurement, strict)
    except DiagnosisError as e:
        print(f"❌ [{e.error_code}] {e}", file=sys.stderr)
        return EXIT_DIAGNOSIS_ERROR

    print_run(run, args.json, args.mentor_prompt)

    if args.pdf is not None:
        try:
            args.pdf.write_bytes(generate_diagnosis_pdf(run).getvalue())
        except OSError as e:
            print(f"❌ PDF 저장 실패: {e}", file=sys.stderr)
            return EXIT_OUTPUT_ERROR
        logger.info(f"PDF 리포트 저장: {args.pdf}")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
