import logging

import pytest

from hvac_diagnosis.config.pt_chart import PT_CHART
from hvac_diagnosis.core.exceptions import OutOfRangeError, UnknownRefrigerantError
from hvac_diagnosis.core.pt_chart import PTChart, PropertyTable, interpolate, pressure_at, temperature_at
from hvac_diagnosis.models.diagnosis_models import Direction, Refrigerant


class TestPropertyTable:
    def test_rejects_single_point(self):
        with pytest.raises(ValueError):
            PropertyTable("R-BAD", {0: 1.0})

    def test_rejects_non_increasing_pressures(self):
        with pytest.raises(ValueError):
            PropertyTable("R-BAD", {0: 1.0, 5: 1.0, 10: 2.0})

    def test_points_sorted_by_temperature(self):
        table = PropertyTable("R-T", {10: 2.0, 0: 1.0})

        assert table.temperatures == (0.0, 10.0)
        assert table.pressures == (1.0, 2.0)
        assert table.temperature_bounds == (0.0, 10.0)
        assert table.pressure_bounds == (1.0, 2.0)

    def test_covers(self):
        table = PropertyTable("R-T", {0: 1.0, 10: 2.0})

        assert table.covers_temperature(0)
        assert table.covers_temperature(10)
        assert not table.covers_temperature(10.5)
        assert table.covers_pressure(1.5)
        assert not table.covers_pressure(0.9)


class TestInterpolation:
    def test_exact_at_knots(self, chart):
        for refrigerant, points in PT_CHART.items():
            for temperature, pressure in points.items():
                assert chart.pressure_at(refrigerant, temperature) == pressure
                assert chart.temperature_at(refrigerant, pressure) == temperature

    def test_linear_between_knots(self, fixture_chart):
        assert fixture_chart.pressure_at("R-X", 5) == pytest.approx(1.5)
        assert fixture_chart.pressure_at("R-X", 15) == pytest.approx(3.0)
        assert fixture_chart.temperature_at("R-X", 3.0) == pytest.approx(15.0)
        assert fixture_chart.temperature_at("R-Y", 2.5) == pytest.approx(0.0)

    def test_clamps_outside_table(self, fixture_chart):
        assert fixture_chart.pressure_at("R-X", -100) == 1.0
        assert fixture_chart.pressure_at("R-X", 100) == 4.0
        assert fixture_chart.temperature_at("R-X", -5) == 0.0
        assert fixture_chart.temperature_at("R-X", 99) == 20.0

    def test_monotonic_in_both_directions(self, chart):
        for refrigerant in chart.refrigerants:
            temps = [t / 2 for t in range(-110, 131)]
            pressures = [chart.pressure_at(refrigerant, t) for t in temps]
            assert pressures == sorted(pressures)

            gauge = [p / 10 for p in range(-10, 260)]
            saturation = [chart.temperature_at(refrigerant, p) for p in gauge]
            assert saturation == sorted(saturation)

    def test_inverse_inside_table(self, chart):
        for temperature in (-42.5, -17.3, 0.0, 12.8, 37.1):
            pressure = chart.pressure_at("R-22", temperature)
            assert chart.temperature_at("R-22", pressure) == pytest.approx(temperature)

    def test_r22_vacuum_entry(self, chart):
        assert chart.pressure_at("R-22", -45) == pytest.approx(-0.19)
        assert chart.temperature_at("R-22", -0.5) == -45.0

    def test_accepts_enum(self, chart):
        assert chart.pressure_at(Refrigerant.R22, 0) == 4.04
        assert chart.pressure_at(Refrigerant.R134A, 0) == 1.48

    def test_interpolate_direction(self, fixture_chart):
        assert fixture_chart.interpolate("R-X", 5, Direction.TEMP_TO_PRESS) == pytest.approx(1.5)
        assert fixture_chart.interpolate("R-X", 1.5, "press_to_temp") == pytest.approx(5.0)

        with pytest.raises(ValueError):
            fixture_chart.interpolate("R-X", 5, "sideways")


class TestUnknownRefrigerant:
    def test_falls_back_to_default_table(self, fixture_chart, caplog):
        with caplog.at_level(logging.WARNING, logger="hvac_diagnosis.core.pt_chart"):
            value = fixture_chart.pressure_at("R-Z", 5)

        assert value == pytest.approx(1.5)
        assert "R-Z" in caplog.text

    def test_unknown_id_uses_default_r22_table(self, chart):
        assert chart.pressure_at("R-999", 0) == 4.04
        assert pressure_at("R-999", 0, chart=chart) == 4.04

    def test_is_known(self, chart):
        assert chart.is_known("R-404A")
        assert chart.is_known(Refrigerant.R134A)
        assert not chart.is_known("R-410A")

    def test_missing_default_table_rejected(self):
        with pytest.raises(ValueError):
            PTChart({"R-X": {0: 1.0, 10: 2.0}}, default_refrigerant="R-22")


class TestStrictMode:
    def test_unknown_refrigerant_raises(self, strict_fixture_chart):
        with pytest.raises(UnknownRefrigerantError) as exc_info:
            strict_fixture_chart.pressure_at("R-Z", 5)

        assert exc_info.value.error_code == "UNKNOWN_REFRIGERANT"
        assert exc_info.value.refrigerant == "R-Z"

    def test_out_of_range_raises(self, strict_fixture_chart):
        with pytest.raises(OutOfRangeError) as exc_info:
            strict_fixture_chart.temperature_at("R-X", 4.5)

        assert exc_info.value.bounds == (1.0, 4.0)
        assert exc_info.value.value == 4.5

    def test_in_range_values_unaffected(self, strict_fixture_chart):
        assert strict_fixture_chart.pressure_at("R-X", 20) == 4.0

    def test_per_call_override(self, fixture_chart, strict_fixture_chart):
        with pytest.raises(OutOfRangeError):
            fixture_chart.pressure_at("R-X", 25, strict=True)

        assert strict_fixture_chart.pressure_at("R-X", 25, strict=False) == 4.0
        assert strict_fixture_chart.pressure_at("R-Z", 5, strict=False) == pytest.approx(1.5)


class TestModuleFunctions:
    def test_injected_chart(self, fixture_chart):
        assert pressure_at("R-X", 5, chart=fixture_chart) == pytest.approx(1.5)
        assert temperature_at("R-X", 3.0, chart=fixture_chart) == pytest.approx(15.0)
        assert interpolate("R-X", 5, "temp_to_press", chart=fixture_chart) == pytest.approx(1.5)

    def test_default_chart(self):
        assert pressure_at("R-404A", 0, strict=False) == 5.09
        assert pressure_at("R-999", 0, strict=False) == pressure_at("R-22", 0, strict=False)
