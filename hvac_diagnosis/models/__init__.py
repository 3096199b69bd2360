"""Data models for diagnostic inputs and results."""

from .diagnosis_models import (
    Refrigerant,
    ApplicationClass,
    Severity,
    max_severity,
    PatternKey,
    Symptom,
    Direction,
    FieldStandard,
    CondensingTarget,
    RefrigerantInfo,
    Measurement,
    DerivedMetrics,
    FaultPattern,
    DiagnosisResult,
    CheckStep,
    DurationRange,
    WorkflowRecommendation,
    Urgency,
    DiagnosisKind,
    CustomerSymptom,
    DetailQuestion,
    CustomerDiagnosis
)

__all__ = [
    'Refrigerant',
    'ApplicationClass',
    'Severity',
    'max_severity',
    'PatternKey',
    'Symptom',
    'Direction',
    'FieldStandard',
    'CondensingTarget',
    'RefrigerantInfo',
    'Measurement',
    'DerivedMetrics',
    'FaultPattern',
    'DiagnosisResult',
    'CheckStep',
    'DurationRange',
    'WorkflowRecommendation',
    'Urgency',
    'DiagnosisKind',
    'CustomerSymptom',
    'DetailQuestion',
    'CustomerDiagnosis'
]
