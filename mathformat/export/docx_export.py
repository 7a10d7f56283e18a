"""Word (.docx) export of a converted expression.

The document holds plain paragraphs only: a centred title, the original input
and the LaTeX text. No equation objects are embedded.
"""
from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Optional

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from loguru import logger

from mathformat import config
from mathformat.errors import ExportError

DOCX_MEDIA_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)

TITLE = "Math Expression"
INPUT_HEADING = "Original Input:"
LATEX_HEADING = "LaTeX Format:"


def build_document(input_text: str, latex: str):
    doc = Document()

    title = doc.add_heading(TITLE, level=1)
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER

    doc.add_heading(INPUT_HEADING, level=2)
    doc.add_paragraph().add_run(input_text)

    doc.add_heading(LATEX_HEADING, level=2)
    doc.add_paragraph().add_run(latex)
    return doc


def document_bytes(input_text: str, latex: str) -> bytes:
    buffer = BytesIO()
    try:
        build_document(input_text, latex).save(buffer)
    except Exception as e:
        raise ExportError(f"Failed to build Word document: {e}") from e
    return buffer.getvalue()


def export_to_word(
    input_text: str, latex: str, output_path: Optional[Path] = None
) -> Path:
    """Write the document to ``output_path`` (default: ``math-expression.docx``
    in the export directory) and return the path written."""
    output_path = Path(output_path or config.EXPORT_DIR / config.DEFAULT_EXPORT_FILENAME)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        build_document(input_text, latex).save(str(output_path))
    except Exception as e:
        logger.error(f"Failed to save Word document to {output_path}: {e}")
        raise ExportError(f"Failed to write {output_path}: {e}") from e

    logger.success(f"Word document saved to {output_path}")
    return output_path
