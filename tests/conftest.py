"""
Shared test fixtures for the resume_ats test suite.

Sets environment variables before any package imports so settings are
built for the test environment, then provides sample resume texts and
factory fixtures that build DOCX and PDF documents in memory.
"""

import io
import os

# === Set environment BEFORE any resume_ats imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from typing import Optional

import pytest
from docx import Document

from resume_ats.core.ats import ATSScanner
from resume_ats.nlp import ResumeParser


# ---------------------------------------------------------------------------
# Sample resume texts
# ---------------------------------------------------------------------------


@pytest.fixture
def jane_doe_text() -> str:
    """Minimal plain-text resume with two recognised sections."""
    return "\n".join([
        "Jane Doe",
        "jane@x.com",
        "555-0101",
        "EXPERIENCE",
        "Engineer at Acme",
        "2020-2023",
        "• Built systems",
        "EDUCATION",
        "BS CS",
    ])


@pytest.fixture
def complete_resume_text() -> str:
    """A resume that passes every audit check (over 200 words)."""
    bullets = [
        f"- Improved throughput of billing service {i} by {10 + i}% through query tuning and caching"
        for i in range(1, 16)
    ]
    return "\n".join([
        "John Smith",
        "Email: john.smith@example.com",
        "Phone: +1 (415) 555-0134",
        "linkedin.com/in/johnsmith | github.com/johnsmith",
        "",
        "PROFESSIONAL SUMMARY",
        "Backend engineer with eight years of experience building payment platforms.",
        "",
        "WORK EXPERIENCE",
        "SENIOR SOFTWARE ENGINEER",
        "Acme Payments, 2019 - Present",
        *bullets,
        "",
        "EDUCATION",
        "Bachelor of Science in Computer Science, State University, 2015",
        "",
        "TECHNICAL SKILLS",
        "Python, PostgreSQL, Kafka, Docker, Kubernetes, AWS",
    ])


# ---------------------------------------------------------------------------
# Document factories
# ---------------------------------------------------------------------------


@pytest.fixture
def make_docx_bytes():
    """Factory that builds a DOCX document from paragraphs and an optional table."""

    def _factory(
        paragraphs: list[str],
        table_rows: Optional[list[list[str]]] = None,
    ) -> bytes:
        document = Document()
        for paragraph in paragraphs:
            document.add_paragraph(paragraph)

        if table_rows:
            table = document.add_table(rows=len(table_rows), cols=len(table_rows[0]))
            for row, values in zip(table.rows, table_rows):
                for cell, value in zip(row.cells, values):
                    cell.text = value

        buffer = io.BytesIO()
        document.save(buffer)
        return buffer.getvalue()

    return _factory


def _escape_pdf_string(value: str) -> str:
    return value.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


@pytest.fixture
def make_pdf_bytes():
    """Factory that builds a single-page PDF with one text line per entry."""

    def _factory(lines: list[str]) -> bytes:
        operations = ["BT", "/F1 12 Tf", "16 TL", "72 720 Td"]
        operations.extend(f"({_escape_pdf_string(line)}) Tj T*" for line in lines)
        operations.append("ET")
        stream = "\n".join(operations).encode("latin-1")

        objects = [
            b"<< /Type /Catalog /Pages 2 0 R >>",
            b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
            b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            b"/Resources << /Font << /F1 4 0 R >> >> /Contents 5 0 R >>",
            b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
            b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        ]

        pdf = bytearray(b"%PDF-1.4\n")
        offsets = []
        for number, body in enumerate(objects, start=1):
            offsets.append(len(pdf))
            pdf += b"%d 0 obj\n" % number + body + b"\nendobj\n"

        xref_offset = len(pdf)
        pdf += b"xref\n0 %d\n" % (len(objects) + 1)
        pdf += b"0000000000 65535 f \n"
        for offset in offsets:
            pdf += b"%010d 00000 n \n" % offset
        pdf += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
        pdf += b"startxref\n%d\n%%%%EOF\n" % xref_offset
        return bytes(pdf)

    return _factory


# ---------------------------------------------------------------------------
# Component fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def resume_parser() -> ResumeParser:
    return ResumeParser()


@pytest.fixture
def scanner() -> ATSScanner:
    return ATSScanner()
