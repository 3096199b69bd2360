import pytest
from pydantic import ValidationError

from hvac_diagnosis.core.exceptions import FieldStandardNotFoundError, OutOfRangeError, UnknownRefrigerantError
from hvac_diagnosis.core.field_standard import FieldStandardResolver, field_standard
from hvac_diagnosis.models.diagnosis_models import ApplicationClass, FieldStandard, Refrigerant


class TestClassifyApplication:
    @pytest.mark.parametrize("label, expected", [
        ("냉장 (0°C)", ApplicationClass.REFRIGERATED),
        ("냉동 (-20°C)", ApplicationClass.FROZEN),
        ("초저온 (-35°C)", ApplicationClass.ULTRA_LOW),
        ("냉동 (테이블냉동고)", ApplicationClass.FROZEN),
        ("쇼케이스", ApplicationClass.REFRIGERATED),
        ("냉동 겸용 초저온", ApplicationClass.ULTRA_LOW),
    ])
    def test_label(self, label, expected):
        assert FieldStandardResolver.classify_application(label) == expected


class TestStandardFor:
    def test_r22_refrigerated(self, resolver):
        standard = resolver.standard_for("R-22", "냉장 (0°C)")

        assert standard.low_p_range == (1.9, 2.1)
        assert standard.low_p_target == 2.0
        assert standard.evap_temp == -15

    def test_r404a_ultra_low(self, resolver):
        standard = resolver.standard_for(Refrigerant.R404A, "초저온 (-35°C)")

        assert standard.low_p_range == (-0.2, 0.2)
        assert standard.low_p_target == 0.0

    def test_missing_row_falls_back(self, resolver):
        standard = resolver.standard_for("R-134a", "초저온 (-35°C)")

        assert standard == resolver.default_standard
        assert standard.low_p_target == 2.0

    def test_missing_row_strict(self, resolver):
        with pytest.raises(FieldStandardNotFoundError) as exc_info:
            resolver.standard_for("R-134a", "초저온 (-35°C)", strict=True)

        assert exc_info.value.application == "초저온"

    def test_unknown_refrigerant(self, resolver):
        assert resolver.standard_for("R-410A", "냉장") == resolver.default_standard

        with pytest.raises(UnknownRefrigerantError):
            resolver.standard_for("R-410A", "냉장", strict=True)

    def test_injected_standards(self, fixture_resolver):
        assert fixture_resolver.standard_for("R-X", "냉장").low_p_target == 1.5
        assert fixture_resolver.standard_for("R-22", "냉장") == fixture_resolver.default_standard

    def test_module_function(self):
        assert field_standard("R-22", "냉동 (-20°C)", strict=False).low_p_range == (0.8, 1.2)


class TestTargetCondensingPressure:
    def test_ambient_plus_fifteen(self, resolver):
        target = resolver.target_condensing_pressure("R-22", 30)

        assert target.target_cond_temp == 45.0
        assert target.target_high_p == 16.6

    def test_interpolated(self, resolver):
        # 47°C: 16.60 + 2/5 × 2.18 = 17.47
        assert resolver.target_condensing_pressure("R-22", 32).target_high_p == 17.5
        assert resolver.target_condensing_pressure("R-404A", 30).target_high_p == 19.8

    def test_clamped_above_table(self, resolver):
        assert resolver.target_condensing_pressure("R-22", 50).target_high_p == 23.7

    def test_strict_above_table(self, resolver):
        with pytest.raises(OutOfRangeError):
            resolver.target_condensing_pressure("R-22", 50, strict=True)


class TestReferenceLookups:
    def test_facility_options(self):
        assert FieldStandardResolver.facility_options("R-134a") == ["냉장 (테이블냉장고)", "냉동 (테이블냉동고)"]
        assert FieldStandardResolver.facility_options("R-22") == ["냉장 (0°C)", "냉동 (-20°C)", "초저온 (-35°C)"]
        assert FieldStandardResolver.facility_options("R-999") == FieldStandardResolver.facility_options("R-404A")

    def test_refrigerant_info(self):
        info = FieldStandardResolver.refrigerant_info(Refrigerant.R404A)

        assert info.oil == "POE"
        assert info.charge_method == "액상 충전 필수"
        assert FieldStandardResolver.refrigerant_info("R-999") is None


class TestFieldStandardModel:
    def test_target_outside_range_rejected(self):
        with pytest.raises(ValidationError):
            FieldStandard(storage_temp=0, evap_temp=-15, low_p_range=(1.9, 2.1), low_p_target=2.5)

    def test_frozen(self, r22_standard):
        with pytest.raises(ValidationError):
            r22_standard.low_p_target = 1.0
