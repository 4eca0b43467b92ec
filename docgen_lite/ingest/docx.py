"""
DOCX Parser
===========

Microsoft Word (.docx) parser using python-docx, with a raw XML fallback
for files python-docx refuses to open.

Legacy binary Word (.doc) is not a zip package and is not supported.
"""

import io
import logging
import zipfile
from typing import List, Optional, Tuple
from xml.etree import ElementTree as ET

from docx import Document
from docx.oxml.ns import qn
from docx.table import Table
from docx.text.paragraph import Paragraph

from .base import DocumentParser, ParseResult, clean_text
from ..errors import ExtractionFailure

DOCX_NS = {
    "w": "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
}

logger = logging.getLogger(__name__)


def _read_document_xml(data: bytes) -> Optional[str]:
    try:
        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            if "word/document.xml" not in zf.namelist():
                return None
            return zf.read("word/document.xml").decode("utf-8", errors="ignore")
    except zipfile.BadZipFile:
        return None


def _paragraph_text(node: ET.Element) -> str:
    parts: List[str] = []
    for text_node in node.findall(".//w:t", DOCX_NS):
        if text_node.text:
            parts.append(text_node.text)
    return "".join(parts).strip()


def _lines_from_xml(xml_text: str) -> Tuple[List[str], int]:
    """Paragraph and table-row lines in body order, plus table count"""
    root = ET.fromstring(xml_text)
    body = root.find("w:body", DOCX_NS)
    if body is None:
        return [], 0

    lines: List[str] = []
    table_count = 0

    for child in list(body):
        if child.tag == f"{{{DOCX_NS['w']}}}p":
            text = _paragraph_text(child)
            if text:
                lines.append(text)
        elif child.tag == f"{{{DOCX_NS['w']}}}tbl":
            table_count += 1
            for row in child.findall(".//w:tr", DOCX_NS):
                cells = []
                for cell in row.findall(".//w:tc", DOCX_NS):
                    cell_text = " ".join(
                        t for t in (_paragraph_text(p) for p in cell.findall(".//w:p", DOCX_NS)) if t
                    )
                    if cell_text:
                        cells.append(cell_text)
                if cells:
                    lines.append(" | ".join(cells))

    return lines, table_count


def _lines_from_document(doc) -> List[str]:
    """Same line shape as _lines_from_xml, read through python-docx"""
    lines: List[str] = []
    for child in doc.element.body.iterchildren():
        if child.tag == qn("w:p"):
            text = Paragraph(child, doc).text.strip()
            if text:
                lines.append(text)
        elif child.tag == qn("w:tbl"):
            for row in Table(child, doc).rows:
                cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if cells:
                    lines.append(" | ".join(cells))
    return lines


class DOCXParser(DocumentParser):
    """
    Microsoft Word (.docx) parser.

    Paragraphs become lines and table rows become "cell | cell" lines,
    both in document body order.
    """

    @property
    def supported_extensions(self) -> List[str]:
        return [".docx"]

    def parse(self, data: bytes, filename: str = None) -> ParseResult:
        """Parse DOCX file"""
        try:
            doc = Document(io.BytesIO(data))
        except Exception as exc:
            return self._parse_xml_fallback(data, exc)

        lines = _lines_from_document(doc)

        metadata = {
            "paragraph_count": len(doc.paragraphs),
            "table_count": len(doc.tables),
        }
        try:
            if doc.core_properties.title:
                metadata["title"] = doc.core_properties.title
        except Exception:
            pass

        return ParseResult(
            full_text=clean_text("\n".join(lines)),
            metadata=metadata,
        )

    def _parse_xml_fallback(self, data: bytes, cause: Exception) -> ParseResult:
        document_xml = _read_document_xml(data)
        if not document_xml:
            raise ExtractionFailure(f"Not a valid DOCX package: {cause}")

        try:
            lines, table_count = _lines_from_xml(document_xml)
        except ET.ParseError as e:
            raise ExtractionFailure(f"Failed to parse DOCX file: {e}")

        logger.info(f"python-docx failed ({cause.__class__.__name__}), used XML fallback")

        return ParseResult(
            full_text=clean_text("\n".join(lines)),
            metadata={"table_count": table_count, "parser": "xml_fallback"},
        )
