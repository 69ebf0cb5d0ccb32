"""
文件處理服務模組
Document Processing Service Module

下載文件並擷取文字與字數

支援 PDF (PyMuPDF)、DOCX (python-docx) 與純文字檔
"""

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from io import BytesIO
from typing import Optional

import fitz  # PyMuPDF
import requests
from docx import Document


logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ("pdf", "docx", "txt")

_WINDOWS_DRIVE_PATTERN = re.compile(r"^[A-Za-z]:\\")


class DocumentProcessingError(Exception):
    """文件處理錯誤"""
    pass


@dataclass(frozen=True)
class ExtractedDocument:
    """擷取結果"""
    text: str
    word_count: int


class DocumentExtractor(ABC):
    """文件擷取器介面"""

    @abstractmethod
    def extract(self, locator: str) -> ExtractedDocument:
        """依文件位置擷取文字與字數"""
        pass


def count_words(text: str) -> int:
    """以空白分隔計算字數"""
    return len(text.split())


def is_local_path(locator: str) -> bool:
    """是否為本機檔案路徑 (file://、絕對路徑或 Windows 磁碟路徑)"""
    return (
        locator.startswith("file://")
        or locator.startswith("/")
        or bool(_WINDOWS_DRIVE_PATTERN.match(locator))
    )


def get_file_extension(locator: str) -> Optional[str]:
    """從 URL 取得副檔名 (忽略查詢字串)"""
    path = locator.split("?", 1)[0]
    file_name = path.rstrip("/").rsplit("/", 1)[-1]
    if "." not in file_name:
        return None
    return file_name.rsplit(".", 1)[-1].lower()


def extract_pdf_text(content: bytes) -> str:
    """以 PyMuPDF 逐頁擷取 PDF 文字"""
    with fitz.open(stream=content, filetype="pdf") as doc:
        return "".join(page.get_text() for page in doc)


def extract_docx_text(content: bytes) -> str:
    """以 python-docx 擷取 DOCX 段落文字"""
    doc = Document(BytesIO(content))
    return "\n".join(paragraph.text for paragraph in doc.paragraphs)


def extract_text(content: bytes, extension: str) -> str:
    """
    依副檔名擷取文件文字

    Raises:
        DocumentProcessingError: 不支援的格式或文件內容無法解析
    """
    if extension == "txt":
        return content.decode("utf-8", errors="replace")

    extractors = {"pdf": extract_pdf_text, "docx": extract_docx_text}
    if extension not in extractors:
        raise DocumentProcessingError(f"Unsupported file type: {extension}")

    try:
        return extractors[extension](content)
    except Exception as e:
        raise DocumentProcessingError(f"Failed to extract text from {extension} document: {e}") from e


class HttpDocumentExtractor(DocumentExtractor):
    """透過 HTTP 下載文件並擷取文字的擷取器"""

    def __init__(self, session: Optional[requests.Session] = None, timeout: int = 30):
        self.session = session or requests.Session()
        self.timeout = timeout
        self.logger = logging.getLogger(__name__ + ".HttpDocumentExtractor")

    def extract(self, locator: str) -> ExtractedDocument:
        """
        下載並擷取文件

        Args:
            locator: 文件 URL

        Returns:
            ExtractedDocument

        Raises:
            DocumentProcessingError: 本機路徑、不支援的格式或下載失敗
        """
        if not locator:
            raise DocumentProcessingError("Document locator cannot be empty")
        if is_local_path(locator):
            raise DocumentProcessingError("Local file system access is not allowed")

        extension = get_file_extension(locator)
        if extension not in SUPPORTED_EXTENSIONS:
            raise DocumentProcessingError(f"Unsupported file type: {extension}")

        content = self._download(locator)
        text = extract_text(content, extension)
        word_count = count_words(text)

        self.logger.info(f"Extracted {len(text)} characters ({word_count} words) from {extension} document")
        return ExtractedDocument(text=text, word_count=word_count)

    def _download(self, url: str) -> bytes:
        """下載文件內容"""
        self.logger.debug(f"Downloading document from {url[:100]}")
        try:
            response = self.session.get(
                url,
                headers={"Cache-Control": "no-cache", "Pragma": "no-cache"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise DocumentProcessingError(f"Failed to download file: {e}") from e

        if not response.content:
            raise DocumentProcessingError("Downloaded file is empty (0 bytes)")
        return response.content


__all__ = [
    "SUPPORTED_EXTENSIONS",
    "DocumentProcessingError",
    "ExtractedDocument",
    "DocumentExtractor",
    "HttpDocumentExtractor",
    "count_words",
    "is_local_path",
    "get_file_extension",
    "extract_text",
]
