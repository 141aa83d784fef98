from io import BytesIO

import pdfplumber
import pytest
from docx import Document
from docx.shared import Pt

from daily_report.exporters import (
    DocxReportExporter,
    PdfReportExporter,
    build_export_filename,
    build_report_title,
    export_report,
    get_exporter,
)
from daily_report.exporters.pdf_exporter import escape_markup
from daily_report.models import DailyReport

TITLE = "Daily Report – February 16, 2026"


def read_docx(data):
    return Document(BytesIO(data))


def read_pdf_lines(data):
    # Blank chars are kept so runs of spaces survive extraction; a
    # non-breaking space is the same visible gap as a space
    with pdfplumber.open(BytesIO(data)) as pdf:
        text = '\n'.join(page.extract_text(keep_blank_chars=True) or '' for page in pdf.pages)
    return [line.replace('\xa0', ' ') for line in text.split('\n') if line.strip()]


# ============================================================================
# Word
# ============================================================================

def test_docx_round_trip_preserves_visible_text(sample_report, visible_lines):
    doc = read_docx(DocxReportExporter().export(sample_report, TITLE))
    assert [p.text for p in doc.paragraphs] == visible_lines


def test_docx_bolds_time_prefix_only(sample_report):
    doc = read_docx(DocxReportExporter().export(sample_report, TITLE))
    timed = doc.paragraphs[1]
    assert [run.text for run in timed.runs] == ["09:30 AM – ", "Fixed ticket X"]
    assert timed.runs[0].bold is True
    assert not timed.runs[1].bold


def test_docx_title_is_bold_and_stored_in_properties(sample_report):
    doc = read_docx(DocxReportExporter().export(sample_report, TITLE))
    assert all(run.bold for run in doc.paragraphs[0].runs)
    assert doc.core_properties.title == TITLE


def test_docx_uses_one_typeface_and_size(sample_report):
    doc = read_docx(DocxReportExporter().export(sample_report, TITLE))
    normal = doc.styles['Normal'].font
    assert normal.name == "Times New Roman"
    assert normal.size == Pt(12)


def test_docx_bullets_are_indented(sample_report):
    doc = read_docx(DocxReportExporter().export(sample_report, TITLE))
    bullets = [p for p in doc.paragraphs if p.text.startswith("- ")]
    assert len(bullets) == 2
    assert all(p.paragraph_format.left_indent == Pt(36) for p in bullets)
    assert not doc.paragraphs[1].paragraph_format.left_indent


def test_docx_blank_line_becomes_space_before_next_paragraph(sample_report):
    doc = read_docx(DocxReportExporter().export(sample_report, TITLE))
    # Title is followed by one blank line, the next activity is not
    assert doc.paragraphs[1].paragraph_format.space_before == Pt(6)
    assert doc.paragraphs[2].paragraph_format.space_before == Pt(0)


def test_docx_empty_report_has_no_paragraphs():
    doc = read_docx(DocxReportExporter().export("", TITLE))
    assert len(doc.paragraphs) == 0


def test_docx_keeps_runs_of_spaces():
    doc = read_docx(DocxReportExporter().export("Lunch  break   was short", TITLE))
    assert [p.text for p in doc.paragraphs] == ["Lunch  break   was short"]


def test_docx_keeps_malformed_lines_as_plain_text():
    doc = read_docx(DocxReportExporter().export("09:30 AM –\nSummary of today", TITLE))
    assert [p.text for p in doc.paragraphs] == ["09:30 AM –", "Summary of today"]
    assert not any(run.bold for p in doc.paragraphs for run in p.runs)


# ============================================================================
# PDF
# ============================================================================

def test_pdf_is_a_pdf(sample_report):
    data = PdfReportExporter().export(sample_report, TITLE)
    assert data.startswith(b"%PDF")


def test_pdf_round_trip_preserves_visible_text(sample_report, visible_lines):
    data = PdfReportExporter().export(sample_report, TITLE)
    assert read_pdf_lines(data) == visible_lines


def test_pdf_uses_bold_and_regular_times(sample_report):
    data = PdfReportExporter().export(sample_report, TITLE)
    with pdfplumber.open(BytesIO(data)) as pdf:
        fonts = {char["fontname"] for char in pdf.pages[0].chars}
    assert any("Times-Bold" in font for font in fonts)
    assert any("Times-Roman" in font for font in fonts)


def test_pdf_escapes_markup_characters():
    data = PdfReportExporter().export("10:00 AM – Compared <old> & <new> configs", TITLE)
    assert read_pdf_lines(data) == ["10:00 AM – Compared <old> & <new> configs"]


def test_pdf_keeps_runs_of_spaces():
    report = "Lunch  break   was short\n10:00 AM – Paired  with ops"
    data = PdfReportExporter().export(report, TITLE)
    assert read_pdf_lines(data) == ["Lunch  break   was short", "10:00 AM – Paired  with ops"]


def test_pdf_empty_report_has_no_text():
    data = PdfReportExporter().export("", TITLE)
    assert data.startswith(b"%PDF")
    assert read_pdf_lines(data) == []


def test_escape_markup():
    assert escape_markup("a < b & c > d") == "a &lt; b &amp; c &gt; d"
    assert escape_markup("a  b   c d") == "a &nbsp;b &nbsp;&nbsp;c d"


# ============================================================================
# Helpers
# ============================================================================

def test_get_exporter():
    assert isinstance(get_exporter("docx"), DocxReportExporter)
    assert isinstance(get_exporter("PDF"), PdfReportExporter)
    with pytest.raises(ValueError):
        get_exporter("rtf")


def test_build_report_title():
    assert build_report_title("2026-02-16") == TITLE


def test_build_export_filename():
    assert build_export_filename("2026-02-16", "docx", author="Rafief") == "Daily Report Rafief 16_02_26.docx"
    assert build_export_filename("2026-02-16", "pdf", author="Ana") == "Daily Report Ana 16_02_26.pdf"


def test_build_export_filename_uses_configured_author(monkeypatch):
    from daily_report import config

    monkeypatch.setattr(config, "REPORT_AUTHOR_NAME", "Jordan")
    assert build_export_filename("2026-02-16", "pdf") == "Daily Report Jordan 16_02_26.pdf"


def test_export_report(sample_report):
    report = DailyReport(
        id="abc",
        report_date="2026-02-16",
        full_report=sample_report,
        created_at="2026-02-16T18:00:00+00:00",
    )
    data, filename, mime = export_report(report, "docx", author="Rafief")
    assert filename == "Daily Report Rafief 16_02_26.docx"
    assert mime == DocxReportExporter.mime_type
    assert read_docx(data).core_properties.title == TITLE

    data, filename, mime = export_report(report, "pdf", author="Rafief")
    assert filename.endswith(".pdf")
    assert mime == "application/pdf"
