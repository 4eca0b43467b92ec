"""
Text Extraction Dispatcher Tests
================================
"""

import asyncio
import threading
import time
import zipfile
from pathlib import Path

import pytest

from docgen_lite.errors import ExtractionFailure, OCRNotAvailableError, UnsupportedFileType
from docgen_lite.ingest import (
    DOCXParser,
    NullOCR,
    TesseractOCR,
    TextExtractionDispatcher,
    clean_text,
    get_ocr_engine,
    normalize_file_type,
)
from docgen_lite.ingest.base import ParseResult
from docgen_lite.ingest.docx import _lines_from_xml, _read_document_xml

from conftest import CountingFactory


def _write(tmp_path: Path, name: str, data: bytes) -> Path:
    path = tmp_path / name
    path.write_bytes(data)
    return path


def _docx_bytes(tmp_path: Path, paragraphs, rows=None) -> bytes:
    from docx import Document

    doc = Document()
    for para in paragraphs:
        doc.add_paragraph(para)
    if rows:
        table = doc.add_table(rows=len(rows), cols=len(rows[0]))
        for r_idx, row in enumerate(rows):
            for c_idx, value in enumerate(row):
                table.cell(r_idx, c_idx).text = value
    file_path = tmp_path / "built.docx"
    doc.save(file_path)
    return file_path.read_bytes()


class ExplodingParser:
    """Parser that must never be reached"""

    def __init__(self):
        self.calls = 0

    def parse(self, data, filename=None):
        self.calls += 1
        raise AssertionError("parser should not be called")


class StaticParser:

    def __init__(self, text="", metadata=None, error=None):
        self.text = text
        self.metadata = metadata or {}
        self.error = error

    def parse(self, data, filename=None):
        if self.error:
            raise self.error
        return ParseResult(full_text=self.text, metadata=self.metadata)


class TestRouting:

    @pytest.mark.asyncio
    async def test_unsupported_extension_touches_nothing(self, settings, tmp_path):
        factory = CountingFactory()
        pdf, docx = ExplodingParser(), ExplodingParser()
        dispatcher = TextExtractionDispatcher(
            settings, ocr_factory=factory, pdf_parser=pdf, docx_parser=docx
        )

        # The file does not even exist: no filesystem access either
        with pytest.raises(UnsupportedFileType) as exc:
            await dispatcher.extract(str(tmp_path / "missing.xyz"), ".xyz")

        assert exc.value.file_type == ".xyz"
        assert factory.engines == []
        assert pdf.calls == 0 and docx.calls == 0

    @pytest.mark.asyncio
    async def test_image_goes_to_ocr(self, settings, tmp_path):
        factory = CountingFactory(text="ORDER FOR PROTECTION")
        path = _write(tmp_path, "scan.png", b"\x89PNG fake")

        async with TextExtractionDispatcher(settings, ocr_factory=factory) as dispatcher:
            text = await dispatcher.extract(str(path), "png")

        assert text == "ORDER FOR PROTECTION"
        assert factory.engines[0].recognize_calls == 1

    @pytest.mark.asyncio
    async def test_pdf_goes_to_pdf_parser(self, settings, tmp_path):
        factory = CountingFactory()
        path = _write(tmp_path, "motion.pdf", b"%PDF-1.4")
        dispatcher = TextExtractionDispatcher(
            settings,
            ocr_factory=factory,
            pdf_parser=StaticParser("  MOTION TO DISMISS \n\n\n\nCase No. 24-CV-100  "),
        )

        text = await dispatcher.extract(str(path), ".PDF")

        assert text == "MOTION TO DISMISS\n\nCase No. 24-CV-100"
        assert factory.engines == []

    @pytest.mark.asyncio
    async def test_docx_is_parsed(self, settings, tmp_path):
        data = _docx_bytes(
            tmp_path,
            ["STATE OF MINNESOTA", "DISTRICT COURT", "Case No. 24-CV-100"],
            rows=[["Petitioner", "Jane Doe"]],
        )
        path = _write(tmp_path, "petition.docx", data)
        dispatcher = TextExtractionDispatcher(settings, ocr_factory=CountingFactory())

        text = await dispatcher.extract(str(path), ".docx")

        assert text.splitlines() == [
            "STATE OF MINNESOTA",
            "DISTRICT COURT",
            "Case No. 24-CV-100",
            "Petitioner | Jane Doe",
        ]

    @pytest.mark.asyncio
    async def test_legacy_doc_fails_loudly(self, settings, tmp_path):
        path = _write(tmp_path, "old.doc", b"\xd0\xcf\x11\xe0 binary word")
        dispatcher = TextExtractionDispatcher(settings, ocr_factory=CountingFactory())

        with pytest.raises(ExtractionFailure) as exc:
            await dispatcher.extract(str(path), ".doc")

        assert exc.value.file_path == str(path)
        assert ".docx" in str(exc.value)


class TestFailures:

    @pytest.mark.asyncio
    async def test_engine_error_is_wrapped_with_path(self, settings, tmp_path):
        path = _write(tmp_path, "broken.pdf", b"junk")
        dispatcher = TextExtractionDispatcher(
            settings,
            ocr_factory=CountingFactory(),
            pdf_parser=StaticParser(error=RuntimeError("xref table broken")),
        )

        with pytest.raises(ExtractionFailure) as exc:
            await dispatcher.extract(str(path), ".pdf")

        assert exc.value.file_path == str(path)
        assert "xref table broken" in str(exc.value)
        assert isinstance(exc.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_missing_file(self, settings, tmp_path):
        dispatcher = TextExtractionDispatcher(settings, ocr_factory=CountingFactory())

        with pytest.raises(ExtractionFailure) as exc:
            await dispatcher.extract(str(tmp_path / "gone.pdf"), ".pdf")

        assert exc.value.file_path == str(tmp_path / "gone.pdf")

    @pytest.mark.asyncio
    async def test_corrupt_pdf_with_real_parser(self, settings, tmp_path):
        path = _write(tmp_path, "corrupt.pdf", b"this is not a pdf")
        dispatcher = TextExtractionDispatcher(settings, ocr_factory=CountingFactory())

        with pytest.raises(ExtractionFailure):
            await dispatcher.extract(str(path), ".pdf")

    @pytest.mark.asyncio
    async def test_ocr_disabled_keeps_failure_type(self, settings, tmp_path):
        path = _write(tmp_path, "photo.jpg", b"\xff\xd8 fake")
        dispatcher = TextExtractionDispatcher(settings, ocr_factory=NullOCR)

        with pytest.raises(OCRNotAvailableError) as exc:
            await dispatcher.extract(str(path), ".jpg")

        assert exc.value.file_path == str(path)


class TestOCRLifecycle:

    @pytest.mark.asyncio
    async def test_lazy_single_init_under_concurrency(self, settings, tmp_path):
        factory = CountingFactory(open_delay=0.05)
        paths = [_write(tmp_path, f"page{i}.png", b"img") for i in range(6)]
        dispatcher = TextExtractionDispatcher(settings, ocr_factory=factory)

        assert factory.engines == []
        assert dispatcher.ocr_engine_name is None

        results = await asyncio.gather(*(dispatcher.extract(str(p), ".png") for p in paths))

        assert len(factory.engines) == 1
        engine = factory.engines[0]
        assert engine.open_calls == 1
        assert engine.recognize_calls == 6
        assert all(r == "SCANNED TEXT" for r in results)
        assert dispatcher.ocr_engine_name == "fake"

        await dispatcher.close()
        await dispatcher.close()
        assert engine.close_calls == 1

    @pytest.mark.asyncio
    async def test_close_without_use(self, settings):
        factory = CountingFactory()
        async with TextExtractionDispatcher(settings, ocr_factory=factory):
            pass
        assert factory.engines == []


class TestHelpers:

    @pytest.mark.parametrize("raw,expected", [
        ("pdf", ".pdf"),
        (".PDF", ".pdf"),
        (" Docx ", ".docx"),
        ("", ""),
    ])
    def test_normalize_file_type(self, raw, expected):
        assert normalize_file_type(raw) == expected

    def test_clean_text_keeps_lines(self):
        raw = "\ufeffSTATE  OF\tMINNESOTA\r\n\r\n\r\n\r\nDISTRICT\u200b COURT  "
        assert clean_text(raw) == "STATE OF MINNESOTA\n\nDISTRICT COURT"

    def test_ocr_engine_factory(self, settings):
        assert isinstance(get_ocr_engine(settings), NullOCR)
        settings.ocr_mode = "tesseract"
        assert isinstance(get_ocr_engine(settings), TesseractOCR)

    def test_docx_xml_fallback(self, tmp_path):
        xml = (
            '<?xml version="1.0" encoding="UTF-8"?>'
            '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
            '<w:body><w:p><w:r><w:t>NOTICE OF APPEAL</w:t></w:r></w:p>'
            '<w:p><w:r><w:t>Case No. </w:t></w:r><w:r><w:t>24-CV-100</w:t></w:r></w:p></w:body>'
            '</w:document>'
        )
        path = tmp_path / "bare.docx"
        with zipfile.ZipFile(path, "w") as zf:
            zf.writestr("word/document.xml", xml)

        result = DOCXParser().parse(path.read_bytes(), filename="bare.docx")

        assert result.full_text == "NOTICE OF APPEAL\nCase No. 24-CV-100"
        assert result.metadata["parser"] == "xml_fallback"

    def test_docx_not_a_zip(self):
        with pytest.raises(ExtractionFailure):
            DOCXParser().parse(b"plain bytes", filename="fake.docx")

    def test_docx_tables_stay_in_body_order(self, tmp_path):
        from docx import Document

        doc = Document()
        doc.add_paragraph("PETITION FOR ORDER FOR PROTECTION")
        table = doc.add_table(rows=1, cols=2)
        table.cell(0, 0).text = "Petitioner"
        table.cell(0, 1).text = "Jane Doe"
        doc.add_paragraph("PRAYER FOR RELIEF")
        path = tmp_path / "ordered.docx"
        doc.save(path)
        data = path.read_bytes()

        result = DOCXParser().parse(data, filename="ordered.docx")
        xml_lines, table_count = _lines_from_xml(_read_document_xml(data))

        assert result.full_text.splitlines() == [
            "PETITION FOR ORDER FOR PROTECTION",
            "Petitioner | Jane Doe",
            "PRAYER FOR RELIEF",
        ]
        assert xml_lines == result.full_text.splitlines()
        assert table_count == result.metadata["table_count"] == 1


class SlowParser:
    """Blocking parser that records how many calls overlap"""

    def __init__(self, delay=0.05):
        self.delay = delay
        self.in_flight = 0
        self.peak = 0
        self._lock = threading.Lock()

    def parse(self, data, filename=None):
        with self._lock:
            self.in_flight += 1
            self.peak = max(self.peak, self.in_flight)
        time.sleep(self.delay)
        with self._lock:
            self.in_flight -= 1
        return ParseResult(full_text="AFFIDAVIT")


class TestConcurrencyCap:

    @pytest.mark.asyncio
    async def test_engine_calls_never_exceed_setting(self, settings, tmp_path):
        settings.extraction_max_concurrency = 2
        parser = SlowParser()
        paths = [_write(tmp_path, f"exhibit{i}.pdf", b"%PDF-1.4") for i in range(6)]
        dispatcher = TextExtractionDispatcher(settings, ocr_factory=CountingFactory(), pdf_parser=parser)

        results = await asyncio.gather(*(dispatcher.extract(str(p), ".pdf") for p in paths))

        assert results == ["AFFIDAVIT"] * 6
        assert parser.peak == 2
