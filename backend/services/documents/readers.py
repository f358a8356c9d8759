"""Format decoders turning uploaded PDF, DOCX/DOC and TXT files into text."""

import html
import io
import logging
import re
import zipfile
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

import PyPDF2
import pdfplumber

from .exceptions import DecodeFailureError, EmptyDocumentError, UnsupportedFormatError
from .models import DocumentFile, FileType


logger = logging.getLogger(__name__)

# silence noisy PDF logging
logging.getLogger("pdfminer").setLevel(logging.ERROR)
logging.getLogger("PyPDF2").setLevel(logging.ERROR)

# WordprocessingML namespace
_W = "{http://schemas.openxmlformats.org/wordprocessingml/2006/main}"

_CID_RE = re.compile(r"\(cid:\d+\)")
_HEADING_STYLE_RE = re.compile(r"^(?:Heading|heading)\s*([1-6])$")


def detect_file_type(filename: str) -> Optional[FileType]:
    """Detect file type from extension.

    Args:
        filename: Name or path of the file

    Returns:
        FileType enum or None if unsupported
    """
    ext = Path(filename).suffix.lower().lstrip(".")
    for file_type in FileType:
        if file_type.value == ext:
            return file_type
    return None


def _normalize_pdf_page(text: str) -> str:
    """Join in-page fragments with single spaces, one line per text line."""
    text = _CID_RE.sub("", text)
    lines = [re.sub(r"[ \t\u00a0]+", " ", line).strip() for line in text.splitlines()]
    return "\n".join(line for line in lines if line)


def extract_text_from_pdf(content: bytes) -> str:
    """Extract text from PDF bytes, page by page.

    Uses PyPDF2 as primary extractor, falls back to pdfplumber.

    Args:
        content: Raw PDF bytes

    Returns:
        Page texts joined with newlines (may be blank for scanned PDFs)

    Raises:
        Exception: Whatever pdfplumber raises when both engines fail
    """
    try:
        reader = PyPDF2.PdfReader(io.BytesIO(content))
        if reader.is_encrypted and not reader.decrypt(""):
            raise ValueError("PDF is password protected")
        pages = [_normalize_pdf_page(page.extract_text() or "") for page in reader.pages]
        text = "\n".join(pages)
        if text.strip():
            return text
        logger.warning("PyPDF2 found no text, trying pdfplumber")
    except Exception as e:
        logger.warning(f"PyPDF2 failed: {e}, trying pdfplumber")

    with pdfplumber.open(io.BytesIO(content)) as pdf:
        pages = [_normalize_pdf_page(page.extract_text() or "") for page in pdf.pages]
    return "\n".join(pages)


def _flag(rpr: Optional[ET.Element], name: str) -> bool:
    if rpr is None:
        return False
    el = rpr.find(f"{_W}{name}")
    if el is None:
        return False
    return el.get(f"{_W}val", "true").lower() not in ("0", "false", "none")


def _run_segments(paragraph: ET.Element) -> List[Tuple[str, Tuple[bool, bool, bool]]]:
    """Collect (text, (bold, italic, underline)) segments for a paragraph.

    Adjacent runs with identical formatting are merged so placeholders split
    across runs by Word come out as one piece of text.
    """
    segments: List[Tuple[str, Tuple[bool, bool, bool]]] = []
    for run in paragraph.iter(f"{_W}r"):
        rpr = run.find(f"{_W}rPr")
        fmt = (_flag(rpr, "b"), _flag(rpr, "i"), _flag(rpr, "u"))
        pieces = []
        for child in run:
            if child.tag == f"{_W}t" and child.text:
                pieces.append(child.text)
            elif child.tag == f"{_W}tab":
                pieces.append("\t")
            elif child.tag in (f"{_W}br", f"{_W}cr"):
                pieces.append("\n")
        text = "".join(pieces)
        if not text:
            continue
        if segments and segments[-1][1] == fmt:
            segments[-1] = (segments[-1][0] + text, fmt)
        else:
            segments.append((text, fmt))
    return segments


def _paragraph_style(paragraph: ET.Element) -> Tuple[str, bool]:
    """Return (html tag, is_list_item) for a paragraph."""
    ppr = paragraph.find(f"{_W}pPr")
    if ppr is None:
        return "p", False
    is_list = ppr.find(f"{_W}numPr") is not None
    style = ppr.find(f"{_W}pStyle")
    if style is not None:
        val = style.get(f"{_W}val", "")
        if val == "Title":
            return "h1", False
        m = _HEADING_STYLE_RE.match(val)
        if m:
            return f"h{m.group(1)}", False
        if val == "ListParagraph":
            is_list = True
    return "p", is_list


def _iter_blocks(container: ET.Element) -> Iterator[ET.Element]:
    """Yield paragraphs and tables in document order, unwrapping content controls."""
    for child in container:
        if child.tag in (f"{_W}p", f"{_W}tbl"):
            yield child
        elif child.tag == f"{_W}sdt":
            content = child.find(f"{_W}sdtContent")
            if content is not None:
                yield from _iter_blocks(content)


def _load_docx_body(content: bytes) -> ET.Element:
    with zipfile.ZipFile(io.BytesIO(content)) as z:
        if "word/document.xml" not in z.namelist():
            raise ValueError("DOCX package is missing word/document.xml")
        tree = ET.fromstring(z.read("word/document.xml"))
    body = tree.find(f"{_W}body")
    if body is None:
        raise ValueError("DOCX document has no body")
    return body


def _block_text(block: ET.Element) -> List[str]:
    if block.tag == f"{_W}p":
        return ["".join(text for text, _ in _run_segments(block))]
    lines: List[str] = []
    for row in block.findall(f"{_W}tr"):
        for cell in row.findall(f"{_W}tc"):
            for inner in _iter_blocks(cell):
                lines.extend(_block_text(inner))
    return lines


def extract_text_from_docx(content: bytes) -> str:
    """Extract raw text from DOCX bytes.

    Parses the DOCX (which is a ZIP) and reads word/document.xml, one line per
    paragraph. Table cells contribute one line per cell paragraph.

    Args:
        content: Raw DOCX bytes

    Returns:
        Extracted text

    Raises:
        zipfile.BadZipFile: If the content is not an OOXML package
        ValueError: If the package has no document part
    """
    body = _load_docx_body(content)
    lines: List[str] = []
    for block in _iter_blocks(body):
        lines.extend(_block_text(block))
    return "\n".join(lines)


def _segments_to_html(segments: List[Tuple[str, Tuple[bool, bool, bool]]]) -> str:
    parts = []
    for text, (bold, italic, underline) in segments:
        chunk = html.escape(text, quote=False).replace("\n", "<br />")
        if underline:
            chunk = f"<u>{chunk}</u>"
        if italic:
            chunk = f"<em>{chunk}</em>"
        if bold:
            chunk = f"<strong>{chunk}</strong>"
        parts.append(chunk)
    return "".join(parts)


def _table_to_html(table: ET.Element) -> str:
    rows = []
    for row in table.findall(f"{_W}tr"):
        cells = []
        for cell in row.findall(f"{_W}tc"):
            inner = "".join(
                _block_to_html(block) for block in _iter_blocks(cell)
            )
            cells.append(f"<td>{inner}</td>")
        rows.append(f"<tr>{''.join(cells)}</tr>")
    return f"<table>{''.join(rows)}</table>"


def _block_to_html(block: ET.Element) -> str:
    if block.tag == f"{_W}tbl":
        return _table_to_html(block)
    inner = _segments_to_html(_run_segments(block))
    if not inner.strip():
        return ""
    tag, _ = _paragraph_style(block)
    return f"<{tag}>{inner}</{tag}>"


def extract_html_from_docx(content: bytes) -> str:
    """Convert DOCX bytes to lightweight HTML, keeping basic formatting.

    Headings and the Title style become <h1>-<h6>, numbered/bulleted
    paragraphs become <ul><li> lists, bold/italic/underline runs become
    <strong>/<em>/<u>, and tables become <table> markup. Empty paragraphs
    are dropped.

    Args:
        content: Raw DOCX bytes

    Returns:
        HTML fragment (no <html>/<body> wrapper)
    """
    body = _load_docx_body(content)
    out: List[str] = []
    list_items: List[str] = []

    def flush_list():
        if list_items:
            out.append(f"<ul>{''.join(list_items)}</ul>")
            list_items.clear()

    for block in _iter_blocks(body):
        if block.tag == f"{_W}p":
            _, is_list = _paragraph_style(block)
            if is_list:
                inner = _segments_to_html(_run_segments(block))
                if inner.strip():
                    list_items.append(f"<li>{inner}</li>")
                continue
        flush_list()
        rendered = _block_to_html(block)
        if rendered:
            out.append(rendered)
    flush_list()

    return "\n".join(out)


def extract_text_from_txt(content: bytes) -> str:
    """Decode plain text bytes.

    Tries UTF-8 (with or without BOM) and falls back to latin-1.

    Args:
        content: Raw file bytes

    Returns:
        File contents
    """
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError:
        # Try with different encoding
        return content.decode("latin-1")


def decode(file: DocumentFile, as_html: bool = False) -> str:
    """Decode an uploaded file into plain text.

    Automatically detects file type from the extension and uses the
    appropriate extractor.

    Args:
        file: The uploaded file
        as_html: For DOCX/DOC, return formatted HTML instead of raw text

    Returns:
        Decoded, non-blank text

    Raises:
        UnsupportedFormatError: If the extension is not supported
        EmptyDocumentError: If nothing but whitespace was extracted
        DecodeFailureError: If the underlying decoder failed
    """
    ext = file.extension
    file_type = detect_file_type(file.filename)

    if file_type is None:
        raise UnsupportedFormatError(ext)

    try:
        if file_type == FileType.PDF:
            text = extract_text_from_pdf(file.content)
        elif file_type in (FileType.DOCX, FileType.DOC):
            if as_html:
                text = extract_html_from_docx(file.content)
            else:
                text = extract_text_from_docx(file.content)
        else:
            text = extract_text_from_txt(file.content)
    except Exception as e:
        logger.error(f"Error extracting text from {file.filename}: {e}")
        raise DecodeFailureError(ext, e) from e

    if not text or not text.strip():
        raise EmptyDocumentError(ext)

    logger.debug(f"Decoded {file.filename}: {len(text)} characters")
    return text


def decode_path(file_path: str, as_html: bool = False) -> str:
    """Decode a file on disk. See decode()."""
    return decode(DocumentFile.from_path(file_path), as_html=as_html)
