"""
文件處理服務測試模組
Test module for document processing
"""

import sys
from io import BytesIO
from pathlib import Path
from unittest.mock import Mock

import fitz
import pytest
import requests
from docx import Document

sys.path.append(str(Path(__file__).parent.parent.parent.parent))

from translator_match.services.document_processor import (
    DocumentProcessingError,
    ExtractedDocument,
    HttpDocumentExtractor,
    count_words,
    extract_text,
    get_file_extension,
    is_local_path,
)


def session_returning(content: bytes, status_error: Exception = None) -> Mock:
    """模擬 requests.Session"""
    response = Mock()
    response.content = content
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    session = Mock(spec=requests.Session)
    session.get.return_value = response
    return session


@pytest.fixture
def pdf_bytes() -> bytes:
    """單頁 PDF"""
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), "Service agreement for translation")
    content = doc.tobytes()
    doc.close()
    return content


@pytest.fixture
def docx_bytes() -> bytes:
    """兩段落的 DOCX"""
    doc = Document()
    doc.add_paragraph("Installation guide")
    doc.add_paragraph("Connect the power cable first")
    buffer = BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


class TestHelpers:
    """測試輔助函數"""

    def test_count_words(self) -> None:
        assert count_words("Hello   world\nthis\tis a test") == 6
        assert count_words("") == 0
        assert count_words("   \n ") == 0

    @pytest.mark.parametrize("locator", [
        "file:///etc/passwd",
        "/home/user/doc.txt",
        "C:\\Users\\doc.txt",
    ])
    def test_local_paths(self, locator: str) -> None:
        assert is_local_path(locator) is True

    def test_remote_url_is_not_local(self) -> None:
        assert is_local_path("https://example.com/doc.txt") is False

    @pytest.mark.parametrize("locator,expected", [
        ("https://example.com/files/report.PDF", "pdf"),
        ("https://cdn.example.com/a/b/contract.docx?token=abc.def&x=1", "docx"),
        ("https://example.com/notes.txt", "txt"),
        ("https://example.com/download", None),
    ])
    def test_get_file_extension(self, locator: str, expected) -> None:
        assert get_file_extension(locator) == expected


class TestHttpDocumentExtractor:
    """測試 HTTP 文件擷取器"""

    def test_extract_text(self) -> None:
        session = session_returning(b"The quick brown fox jumps")
        extractor = HttpDocumentExtractor(session=session, timeout=5)

        result = extractor.extract("https://example.com/story.txt?sig=123")

        assert result == ExtractedDocument(text="The quick brown fox jumps", word_count=5)
        args, kwargs = session.get.call_args
        assert args[0] == "https://example.com/story.txt?sig=123"
        assert kwargs["timeout"] == 5

    def test_rejects_local_path(self) -> None:
        session = session_returning(b"secret")
        with pytest.raises(DocumentProcessingError, match="Local file system"):
            HttpDocumentExtractor(session=session).extract("file:///etc/hosts.txt")
        session.get.assert_not_called()

    def test_rejects_unknown_extension(self) -> None:
        with pytest.raises(DocumentProcessingError, match="Unsupported file type: xlsx"):
            HttpDocumentExtractor(session=session_returning(b"x")).extract("https://example.com/sheet.xlsx")

    def test_extract_pdf(self, pdf_bytes: bytes) -> None:
        extractor = HttpDocumentExtractor(session=session_returning(pdf_bytes))

        result = extractor.extract("https://example.com/files/contract.pdf?token=abc")

        assert "Service agreement for translation" in result.text
        assert result.word_count == 4

    def test_extract_docx(self, docx_bytes: bytes) -> None:
        extractor = HttpDocumentExtractor(session=session_returning(docx_bytes))

        result = extractor.extract("https://example.com/files/manual.docx")

        assert result.text == "Installation guide\nConnect the power cable first"
        assert result.word_count == 7

    @pytest.mark.parametrize("extension", ["pdf", "docx"])
    def test_corrupt_document(self, extension: str) -> None:
        session = session_returning(b"not a real document")
        with pytest.raises(DocumentProcessingError, match=f"Failed to extract text from {extension}"):
            HttpDocumentExtractor(session=session).extract(f"https://example.com/doc.{extension}")

    def test_empty_locator(self) -> None:
        with pytest.raises(DocumentProcessingError, match="empty"):
            HttpDocumentExtractor(session=session_returning(b"x")).extract("")

    def test_http_error(self) -> None:
        session = session_returning(b"", status_error=requests.HTTPError("404 Not Found"))
        with pytest.raises(DocumentProcessingError, match="Failed to download"):
            HttpDocumentExtractor(session=session).extract("https://example.com/missing.txt")

    def test_connection_error(self) -> None:
        session = Mock(spec=requests.Session)
        session.get.side_effect = requests.ConnectionError("refused")
        with pytest.raises(DocumentProcessingError, match="refused"):
            HttpDocumentExtractor(session=session).extract("https://example.com/doc.txt")

    def test_empty_download(self) -> None:
        with pytest.raises(DocumentProcessingError, match="empty"):
            HttpDocumentExtractor(session=session_returning(b"")).extract("https://example.com/doc.txt")


class TestExtractText:
    """測試依格式擷取文字"""

    def test_txt_is_decoded_as_utf8(self) -> None:
        assert extract_text("翻譯 test".encode("utf-8"), "txt") == "翻譯 test"

    def test_pdf(self, pdf_bytes: bytes) -> None:
        assert extract_text(pdf_bytes, "pdf").split() == ["Service", "agreement", "for", "translation"]

    def test_docx(self, docx_bytes: bytes) -> None:
        assert extract_text(docx_bytes, "docx").splitlines() == ["Installation guide", "Connect the power cable first"]

    def test_unsupported_extension(self) -> None:
        with pytest.raises(DocumentProcessingError, match="Unsupported file type: odt"):
            extract_text(b"x", "odt")
