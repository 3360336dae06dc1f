"""Output generation for schedules (text, PDF)."""

from makeshift.output.pdf_generator import PDFGenerator
from makeshift.output.text_report import TextReport

__all__ = [
    "PDFGenerator",
    "TextReport",
]
