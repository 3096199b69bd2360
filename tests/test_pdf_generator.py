import pytest

from hvac_diagnosis.models.diagnosis_models import Measurement
from hvac_diagnosis.utils.pdf_generator import DiagnosisReportGenerator


@pytest.fixture
def generator():
    return DiagnosisReportGenerator()


class TestDiagnosisReportGenerator:
    def test_font_selected(self, generator):
        assert generator.font_name in ("Korean", "Helvetica")

    def test_missing_font_path_falls_back(self):
        generator = DiagnosisReportGenerator(font_path="/nonexistent/font.ttf")

        assert generator.font_name in ("Korean", "Helvetica")

    def test_normal_report(self, generator, pipeline):
        run = pipeline.run(Measurement(low_pressure=2.0, high_pressure=12.0))
        buffer = generator.generate_report(run)

        assert buffer.getvalue().startswith(b"%PDF")
        assert buffer.tell() == 0

    def test_fault_report(self, generator, pipeline):
        run = pipeline.run(Measurement(
            low_pressure=1.0,
            high_pressure=8.0,
            suction_temp=-27.0,
            liquid_temp=20.0,
            symptoms=["액면계 거품", "헌팅"],
            note="<드라이어> & 필터 확인"
        ))
        data = generator.generate_report(run).getvalue()

        assert data.startswith(b"%PDF")
        assert len(data) > 1000
