"""PDF 진단 리포트 생성 유틸리티"""

from datetime import datetime
from typing import List, Optional
from io import BytesIO
from xml.sax.saxutils import escape
import os

from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_LEFT
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont, TTFError

from hvac_diagnosis.config.settings import REPORT_CONFIG
from hvac_diagnosis.core.diagnostic_pipeline import DiagnosticRun
from hvac_diagnosis.models.diagnosis_models import Severity
from hvac_diagnosis.utils.report import DISCLAIMER, format_number, format_signed

import logging

logger = logging.getLogger(__name__)

SYSTEM_FONT_PATHS = [
    "C:/Windows/Fonts/malgun.ttf",  # 맑은 고딕
    "C:/Windows/Fonts/NanumGothic.ttf",  # 나눔고딕
    "/Library/Fonts/NanumGothic.ttf",  # macOS
    "/usr/share/fonts/truetype/nanum/NanumGothic.ttf"  # Linux
]

SEVERITY_COLORS = {
    Severity.NORMAL: '#28A745',
    Severity.CAUTION: '#E0A800',
    Severity.WARNING: '#FD7E14',
    Severity.CRITICAL: '#DC3545',
}


class DiagnosisReportGenerator:
    """냉동 사이클 진단 결과 PDF 리포트 생성기"""

    def __init__(self, font_path: Optional[str] = None):
        self.setup_fonts(font_path or REPORT_CONFIG['font_path'])
        self.styles = getSampleStyleSheet()
        self.setup_custom_styles()

    def setup_fonts(self, font_path: Optional[str] = None):
        """한글 폰트 설정 (설정된 경로 우선, 없으면 시스템 폰트 탐색)"""
        font_paths = ([font_path] if font_path else []) + SYSTEM_FONT_PATHS

        self.font_name = 'Helvetica'
        for path in font_paths:
            if not os.path.exists(path):
                continue
            try:
                pdfmetrics.registerFont(TTFont('Korean', path))
            except (TTFError, OSError) as e:
                logger.warning(f"폰트 등록 실패 {path}: {e}")
                continue
            self.font_name = 'Korean'
            logger.info(f"한글 폰트 등록 성공: {path}")
            break
        else:
            logger.warning("한글 폰트를 찾을 수 없습니다. 기본 폰트를 사용합니다.")

    def setup_custom_styles(self):
        """커스텀 스타일 설정"""
        self.custom_styles = {
            'Title': ParagraphStyle(
                'CustomTitle',
                parent=self.styles['Title'],
                fontName=self.font_name,
                fontSize=18,
                spaceAfter=20,
                alignment=TA_CENTER,
                textColor=colors.HexColor('#2E86AB')
            ),
            'Heading': ParagraphStyle(
                'CustomHeading',
                parent=self.styles['Heading1'],
                fontName=self.font_name,
                fontSize=14,
                spaceAfter=12,
                spaceBefore=12,
                textColor=colors.HexColor('#A23B72')
            ),
            'Normal': ParagraphStyle(
                'CustomNormal',
                parent=self.styles['Normal'],
                fontName=self.font_name,
                fontSize=10,
                spaceAfter=6,
                alignment=TA_LEFT
            ),
            'Caution': ParagraphStyle(
                'CustomCaution',
                parent=self.styles['Normal'],
                fontName=self.font_name,
                fontSize=10,
                spaceAfter=8,
                leftIndent=10,
                rightIndent=10,
                backColor=colors.HexColor('#FFF9E6'),
                borderColor=colors.HexColor('#F4A261'),
                borderWidth=1
            ),
            'Footer': ParagraphStyle(
                'CustomFooter',
                parent=self.styles['Normal'],
                fontName=self.font_name,
                fontSize=9,
                textColor=colors.HexColor('#6C757D'),
                alignment=TA_CENTER
            )
        }

    def generate_report(self, run: DiagnosticRun) -> BytesIO:
        """진단 결과를 PDF 리포트로 생성"""
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=72,
            leftMargin=72,
            topMargin=72,
            bottomMargin=18,
            title=REPORT_CONFIG['title']
        )

        story = []

        # 제목
        story.append(Paragraph(escape(REPORT_CONFIG['title']), self.custom_styles['Title']))
        story.append(Spacer(1, 20))

        story.extend(self._create_equipment_section(run))
        story.append(Spacer(1, 20))

        story.extend(self._create_measurement_section(run))
        story.append(Spacer(1, 20))

        story.extend(self._create_diagnosis_section(run))

        # 주의사항 (패턴이 있는 경우)
        if run.fault_pattern is not None:
            story.extend(self._create_caution_section(run.fault_pattern.caution))

        story.extend(self._create_footer_section(run.created_at))

        doc.build(story)
        buffer.seek(0)

        logger.info(f"PDF 리포트 생성 완료: {run.measurement.refrigerant} / {run.diagnosis.severity.value}")
        return buffer

    def _table(self, data: List[List[str]]) -> Table:
        table = Table(data, colWidths=[2*inch, 4*inch])
        table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (0, -1), colors.HexColor('#F8F9FA')),
            ('TEXTCOLOR', (0, 0), (-1, -1), colors.black),
            ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
            ('FONTNAME', (0, 0), (-1, -1), self.font_name),
            ('FONTSIZE', (0, 0), (-1, -1), 10),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 8),
            ('TOPPADDING', (0, 0), (-1, -1), 8),
            ('GRID', (0, 0), (-1, -1), 1, colors.HexColor('#DEE2E6'))
        ]))
        return table

    def _create_equipment_section(self, run: DiagnosticRun) -> List:
        """설비 정보 섹션"""
        low_min, low_max = run.standard.low_p_range
        data = [
            ['냉매', run.measurement.refrigerant],
            ['용도', run.measurement.facility_type],
            ['외기온도', f"{format_number(run.measurement.ambient_temp)}°C"],
            ['정상 저압 범위', f"{format_number(low_min)} ~ {format_number(low_max)} kg/cm²G"],
        ]
        return [Paragraph("설비 정보", self.custom_styles['Heading']), self._table(data)]

    def _create_measurement_section(self, run: DiagnosticRun) -> List:
        """측정값 섹션"""
        measurement = run.measurement
        metrics = run.metrics
        data = [
            ['저압', f"{format_number(measurement.low_pressure)} kg/cm²G "
                     f"(목표: {format_number(run.standard.low_p_target)})"],
            ['고압', f"{format_number(measurement.high_pressure)} kg/cm²G "
                     f"(목표: {format_number(run.target_high_p)})"],
            ['증발온도', f"{format_number(metrics.evap_temp)}°C"],
            ['응축온도', f"{format_number(metrics.cond_temp)}°C"],
            ['과열도', f"{format_number(metrics.superheat)}°C"],
            ['과냉도', f"{format_number(metrics.subcooling)}°C"],
            ['압축비', format_number(metrics.compression_ratio)],
        ]
        return [Paragraph("측정값", self.custom_styles['Heading']), self._table(data)]

    def _create_diagnosis_section(self, run: DiagnosticRun) -> List:
        """진단 결과 섹션"""
        diagnosis = run.diagnosis
        story = [Paragraph("진단 결과", self.custom_styles['Heading'])]

        severity_style = ParagraphStyle(
            'Severity',
            parent=self.custom_styles['Normal'],
            fontSize=12,
            textColor=colors.HexColor(SEVERITY_COLORS[diagnosis.severity])
        )
        story.append(Paragraph(f"상태: {escape(diagnosis.severity.value)}", severity_style))
        story.append(Paragraph(
            f"저압 편차: {format_signed(diagnosis.diff_low)} kg / "
            f"고압 편차: {format_signed(diagnosis.diff_high)} kg",
            self.custom_styles['Normal']
        ))
        if diagnosis.pattern_label:
            story.append(Paragraph(f"패턴: {escape(diagnosis.pattern_label)}", self.custom_styles['Normal']))

        story.append(Paragraph("발견된 문제", self.custom_styles['Heading']))
        for issue in diagnosis.issues:
            story.append(Paragraph(f"• {escape(issue)}", self.custom_styles['Normal']))

        story.append(Paragraph("권장 조치사항", self.custom_styles['Heading']))
        for action in diagnosis.actions:
            story.append(Paragraph(f"• {escape(action)}", self.custom_styles['Normal']))

        return story

    def _create_caution_section(self, caution: str) -> List:
        return [
            Paragraph("주의사항", self.custom_styles['Heading']),
            Paragraph(escape(caution), self.custom_styles['Caution'])
        ]

    def _create_footer_section(self, created_at: datetime) -> List:
        """푸터 섹션 생성"""
        footer_info = f"본 리포트는 {created_at.strftime('%Y년 %m월 %d일 %H:%M:%S')}에 자동 생성되었습니다."
        return [
            Spacer(1, 30),
            Paragraph(footer_info, self.custom_styles['Footer']),
            Paragraph(escape(DISCLAIMER), self.custom_styles['Footer'])
        ]


# 전역 인스턴스 (지연 초기화 - 폰트 탐색은 첫 사용 시)
_pdf_generator: Optional[DiagnosisReportGenerator] = None


def get_pdf_generator() -> DiagnosisReportGenerator:
    global _pdf_generator
    if _pdf_generator is None:
        _pdf_generator = DiagnosisReportGenerator()
    return _pdf_generator


def generate_diagnosis_pdf(run: DiagnosticRun) -> BytesIO:
    """진단 PDF 생성 (편의 함수)"""
    return get_pdf_generator().generate_report(run)
