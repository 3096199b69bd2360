import json

import pytest
from pydantic import ValidationError

from hvac_diagnosis.core.exceptions import UnknownRefrigerantError
from hvac_diagnosis.models.diagnosis_models import Measurement, PatternKey, Refrigerant, Severity, Symptom


class TestMeasurement:
    def test_defaults(self):
        measurement = Measurement(low_pressure=2.0, high_pressure=12.0)

        assert measurement.refrigerant == "R-22"
        assert measurement.facility_type == "냉장 (0°C)"
        assert measurement.ambient_temp == 30.0
        assert measurement.symptoms == []
        assert not measurement.has_pipe_temps

    def test_enums_coerced(self):
        measurement = Measurement(
            refrigerant=Refrigerant.R404A,
            low_pressure=3.4,
            high_pressure=18.0,
            symptoms=[Symptom.HUNTING, "배관 성에"]
        )

        assert measurement.refrigerant == "R-404A"
        assert measurement.symptoms == ["헌팅", "배관 성에"]

    def test_below_full_vacuum_rejected(self):
        with pytest.raises(ValidationError):
            Measurement(low_pressure=-1.5, high_pressure=12.0)

    def test_bare_string_symptoms_rejected(self):
        with pytest.raises(ValidationError):
            Measurement(low_pressure=2.0, high_pressure=12.0, symptoms="압축기 소음")

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError):
            Measurement(low_pressure=float("nan"), high_pressure=12.0)
        with pytest.raises(ValidationError):
            Measurement(low_pressure=2.0, high_pressure=12.0, suction_temp=float("inf"))


class TestDiagnosticPipeline:
    def test_normal_run(self, pipeline):
        run = pipeline.run(Measurement(low_pressure=2.0, high_pressure=12.0))

        assert run.target_high_p == 16.6
        assert run.condensing_target.target_cond_temp == 45.0
        assert run.standard.low_p_target == 2.0
        assert run.metrics.evap_temp == -14.9
        assert run.diagnosis.severity == Severity.NORMAL
        assert run.fault_pattern is None

    def test_undercharge_with_bubbles(self, pipeline):
        run = pipeline.run(Measurement(low_pressure=1.0, high_pressure=8.0, symptoms=["액면계 거품"]))

        assert run.diagnosis.severity == Severity.CRITICAL
        assert run.diagnosis.pattern_key == PatternKey.LOW_LOW
        assert run.fault_pattern is not None
        assert run.fault_pattern.caution

    def test_superheat_from_suction_temp(self, pipeline):
        normal = pipeline.run(Measurement(low_pressure=2.0, high_pressure=12.0, suction_temp=0.0))
        flooding = pipeline.run(Measurement(low_pressure=2.0, high_pressure=12.0, suction_temp=-13.0))

        assert normal.metrics.superheat == 14.9
        assert normal.diagnosis.is_normal
        assert flooding.metrics.superheat == 1.9
        assert flooding.diagnosis.pattern_key == PatternKey.LOW_SUPERHEAT
        assert flooding.diagnosis.severity == Severity.CRITICAL

    def test_frozen_application(self, pipeline):
        run = pipeline.run(Measurement(
            refrigerant="R-404A", facility_type="냉동 (-20°C)", low_pressure=1.0, high_pressure=19.0
        ))

        assert run.standard.low_p_range == (0.8, 1.3)
        assert run.diagnosis.is_normal

    def test_unknown_refrigerant_lenient(self, pipeline):
        run = pipeline.run(Measurement(refrigerant="R-410A", low_pressure=2.0, high_pressure=12.0))

        assert run.standard == pipeline.resolver.default_standard
        assert run.target_high_p == 16.6

    def test_unknown_refrigerant_strict(self, pipeline):
        with pytest.raises(UnknownRefrigerantError):
            pipeline.run(Measurement(refrigerant="R-410A", low_pressure=2.0, high_pressure=12.0), strict=True)

    def test_to_dict_is_json_serializable(self, pipeline):
        run = pipeline.run(Measurement(low_pressure=1.0, high_pressure=8.0, symptoms=["헌팅"]))
        data = json.loads(json.dumps(run.to_dict(), ensure_ascii=False))

        assert data["diagnosis"]["severity"] == "경고"
        assert data["diagnosis"]["pattern_key"] == "hunting"
        assert data["pattern_label"] == "헌팅 (바늘 흔들림)"
        assert data["standard"]["low_p_range"] == [1.9, 2.1]
        assert data["fault_pattern"]["actions"]
