"""공용 fixture - 작은 가상 냉매 표로 주입 동작을 검증한다."""

import logging

import pytest

from hvac_diagnosis.config.pt_chart import PT_CHART
from hvac_diagnosis.core.classifier import FaultClassifier
from hvac_diagnosis.core.diagnostic_pipeline import DiagnosticPipeline
from hvac_diagnosis.core.field_standard import FieldStandardResolver
from hvac_diagnosis.core.pt_chart import PTChart
from hvac_diagnosis.models.diagnosis_models import FieldStandard

# 가상 냉매: R-X 는 구간마다 기울기가 다르고, R-Y 는 두 점짜리 최소 표
FIXTURE_TABLES = {
    "R-X": {0: 1.0, 10: 2.0, 20: 4.0},
    "R-Y": {-10: 0.0, 10: 5.0},
}

FIXTURE_STANDARDS = {
    "R-X": {
        "냉장": {"storage_temp": 0, "evap_temp": 5, "low_p_range": (1.25, 1.75), "low_p_target": 1.5},
    }
}


@pytest.fixture
def fixture_chart():
    return PTChart(FIXTURE_TABLES, default_refrigerant="R-X")


@pytest.fixture
def strict_fixture_chart():
    return PTChart(FIXTURE_TABLES, default_refrigerant="R-X", strict=True)


@pytest.fixture
def chart():
    """실제 P-T 데이터, 환경 설정과 무관하게 관대 모드"""
    return PTChart(PT_CHART, default_refrigerant="R-22", strict=False)


@pytest.fixture
def resolver(chart):
    return FieldStandardResolver(chart=chart, strict=False)


@pytest.fixture
def fixture_resolver(fixture_chart):
    return FieldStandardResolver(standards=FIXTURE_STANDARDS, chart=fixture_chart)


@pytest.fixture
def pipeline(chart, resolver):
    return DiagnosticPipeline(chart=chart, resolver=resolver, classifier=FaultClassifier())


@pytest.fixture
def r22_standard():
    """R-22 냉장 기준"""
    return FieldStandard(storage_temp=0, evap_temp=-15, low_p_range=(1.9, 2.1), low_p_target=2.0)


@pytest.fixture
def classifier():
    return FaultClassifier()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """setup_logging() 이 바꾼 패키지 로거 상태를 테스트마다 원복"""
    yield
    package_logger = logging.getLogger("hvac_diagnosis")
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
