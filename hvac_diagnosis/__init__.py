"""
hvac_diagnosis
==============

냉동 사이클 게이지 진단 엔진.

P-T 차트 보간, 냉매·용도별 현장 기준 조회, 과열도/과냉도/압축비 계산,
규칙 기반 고장 패턴 분류를 제공한다.
"""

from hvac_diagnosis.core.classifier import FaultClassifier, classify
from hvac_diagnosis.core.customer_diagnosis import customer_diagnosis, generate_diagnosis_code
from hvac_diagnosis.core.diagnostic_pipeline import DiagnosticPipeline, DiagnosticRun, run_diagnosis
from hvac_diagnosis.core.exceptions import (
    DiagnosisError,
    FieldStandardNotFoundError,
    OutOfRangeError,
    UnknownRefrigerantError
)
from hvac_diagnosis.core.field_standard import FieldStandardResolver, field_standard, target_condensing_pressure
from hvac_diagnosis.core.metrics import compression_ratio, derived_metrics, subcooling, superheat
from hvac_diagnosis.core.pt_chart import PTChart, interpolate, pressure_at, temperature_at
from hvac_diagnosis.core.workflow_matcher import workflow_for
from hvac_diagnosis.models.diagnosis_models import (
    DiagnosisResult,
    Direction,
    Measurement,
    PatternKey,
    Refrigerant,
    Severity,
    Symptom,
    Urgency
)

__version__ = "1.0.0"

__all__ = [
    # Engine
    'PTChart',
    'interpolate',
    'pressure_at',
    'temperature_at',
    'FieldStandardResolver',
    'field_standard',
    'target_condensing_pressure',
    'compression_ratio',
    'derived_metrics',
    'subcooling',
    'superheat',
    'FaultClassifier',
    'classify',
    'workflow_for',
    'customer_diagnosis',
    'generate_diagnosis_code',
    'DiagnosticPipeline',
    'DiagnosticRun',
    'run_diagnosis',

    # Models
    'DiagnosisResult',
    'Direction',
    'Measurement',
    'PatternKey',
    'Refrigerant',
    'Severity',
    'Symptom',
    'Urgency',

    # Errors
    'DiagnosisError',
    'FieldStandardNotFoundError',
    'OutOfRangeError',
    'UnknownRefrigerantError'
]
