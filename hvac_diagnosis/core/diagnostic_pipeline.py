"""측정값 1건에 대한 전체 진단 흐름 (기준 조회 → 고압 목표 → 파생 지표 → 분류)"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from hvac_diagnosis.core.classifier import FaultClassifier, fault_classifier
from hvac_diagnosis.core.field_standard import FieldStandardResolver
from hvac_diagnosis.core.metrics import DerivedMetricsCalculator
from hvac_diagnosis.core.pt_chart import PTChart, get_pt_chart
from hvac_diagnosis.models.diagnosis_models import (
    CondensingTarget,
    DerivedMetrics,
    DiagnosisResult,
    FaultPattern,
    FieldStandard,
    Measurement
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiagnosticRun:
    measurement: Measurement
    standard: FieldStandard
    condensing_target: CondensingTarget
    metrics: DerivedMetrics
    diagnosis: DiagnosisResult
    fault_pattern: Optional[FaultPattern]
    created_at: datetime

    @property
    def target_high_p(self) -> float:
        return self.condensing_target.target_high_p

    def to_dict(self) -> Dict[str, Any]:
        """JSON 직렬화용 dict"""
        return {
            "measurement": self.measurement.model_dump(mode="json"),
            "standard": self.standard.model_dump(mode="json"),
            "condensing_target": self.condensing_target.model_dump(mode="json"),
            "metrics": self.metrics.model_dump(mode="json"),
            "diagnosis": self.diagnosis.model_dump(mode="json"),
            "pattern_label": self.diagnosis.pattern_label,
            "fault_pattern": self.fault_pattern.model_dump(mode="json") if self.fault_pattern else None,
            "created_at": self.created_at.isoformat(),
        }


class DiagnosticPipeline:
    def __init__(
        self,
        chart: Optional[PTChart] = None,
        resolver: Optional[FieldStandardResolver] = None,
        classifier: Optional[FaultClassifier] = None
    ):
        self.chart = chart or get_pt_chart()
        self.resolver = resolver or FieldStandardResolver(chart=self.chart)
        self.calculator = DerivedMetricsCalculator(self.chart)
        self.classifier = classifier or fault_classifier

    def run(self, measurement: Measurement, strict: Optional[bool] = None) -> DiagnosticRun:
        logger.info(
            f"진단 시작 - {measurement.refrigerant} / {measurement.facility_type}, "
            f"저압 {measurement.low_pressure} 고압 {measurement.high_pressure}"
        )

        standard = self.resolver.standard_for(measurement.refrigerant, measurement.facility_type, strict)
        target = self.resolver.target_condensing_pressure(
            measurement.refrigerant, measurement.ambient_temp, strict
        )
        metrics = self.calculator.calculate(
            measurement.refrigerant,
            measurement.low_pressure,
            measurement.high_pressure,
            measurement.suction_temp,
            measurement.liquid_temp,
            strict
        )
        diagnosis = self.classifier.classify(
            measurement.refrigerant,
            measurement.low_pressure,
            measurement.high_pressure,
            standard,
            target.target_high_p,
            superheat=metrics.superheat,
            subcooling=metrics.subcooling,
            compression_ratio=metrics.compression_ratio,
            symptoms=measurement.symptoms
        )

        logger.info(f"진단 완료 - 상태: {diagnosis.severity.value}, 이슈 {len(diagnosis.issues)}건")

        return DiagnosticRun(
            measurement=measurement,
            standard=standard,
            condensing_target=target,
            metrics=metrics,
            diagnosis=diagnosis,
            fault_pattern=self.classifier.pattern(diagnosis.pattern_key),
            created_at=datetime.now()
        )


# 전역 인스턴스 (지연 초기화)
_pipeline: Optional[DiagnosticPipeline] = None


def get_pipeline() -> DiagnosticPipeline:
    global _pipeline
    if _pipeline is None:
        _pipeline = DiagnosticPipeline()
    return _pipeline


def run_diagnosis(measurement: Measurement, strict: Optional[bool] = None) -> DiagnosticRun:
    return get_pipeline().run(measurement, strict)
