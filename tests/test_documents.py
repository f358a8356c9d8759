import io
import tempfile
import unittest
import zipfile
from pathlib import Path
from unittest.mock import MagicMock, patch

from PyPDF2 import PdfWriter

from services.documents import (
    DecodeFailureError,
    DocumentFile,
    EmptyDocumentError,
    FileType,
    UnsupportedFormatError,
    decode,
    decode_path,
    detect_file_type,
)

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"


def make_docx(body_xml: str) -> bytes:
    document = f'<w:document xmlns:w="{W_NS}"><w:body>{body_xml}</w:body></w:document>'
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as z:
        z.writestr("[Content_Types].xml", "<Types/>")
        z.writestr("word/document.xml", document)
    return buf.getvalue()


def paragraph(text: str, style: str = "", bold: bool = False, numbered: bool = False) -> str:
    ppr = ""
    if style or numbered:
        inner = f'<w:pStyle w:val="{style}"/>' if style else ""
        if numbered:
            inner += '<w:numPr><w:ilvl w:val="0"/><w:numId w:val="1"/></w:numPr>'
        ppr = f"<w:pPr>{inner}</w:pPr>"
    rpr = "<w:rPr><w:b/></w:rPr>" if bold else ""
    return f"<w:p>{ppr}<w:r>{rpr}<w:t xml:space=\"preserve\">{text}</w:t></w:r></w:p>"


def blank_pdf() -> bytes:
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    buf = io.BytesIO()
    writer.write(buf)
    return buf.getvalue()


def mock_page(text: str) -> MagicMock:
    page = MagicMock()
    page.extract_text.return_value = text
    return page


class DetectFileTypeTests(unittest.TestCase):
    def test_known_extensions_case_insensitive(self):
        self.assertEqual(detect_file_type("cv.PDF"), FileType.PDF)
        self.assertEqual(detect_file_type("cv.docx"), FileType.DOCX)
        self.assertEqual(detect_file_type("cv.doc"), FileType.DOC)
        self.assertEqual(detect_file_type("notes.txt"), FileType.TXT)

    def test_unknown_extension(self):
        self.assertIsNone(detect_file_type("cv.rtf"))
        self.assertIsNone(detect_file_type("README"))


class TextDecodeTests(unittest.TestCase):
    def test_utf8_text(self):
        text = decode(DocumentFile("resume.txt", "Jane Doe\nEngineer".encode("utf-8")))
        self.assertEqual(text, "Jane Doe\nEngineer")

    def test_utf8_bom_is_dropped(self):
        text = decode(DocumentFile("resume.txt", b"\xef\xbb\xbfJane Doe"))
        self.assertEqual(text, "Jane Doe")

    def test_latin1_fallback(self):
        text = decode(DocumentFile("resume.txt", b"Caf\xe9 r\xe9sum\xe9"))
        self.assertEqual(text, "Café résumé")

    def test_empty_and_whitespace_only(self):
        for content in (b"", b"   \n\t  "):
            with self.assertRaises(EmptyDocumentError) as ctx:
                decode(DocumentFile("resume.txt", content))
            self.assertEqual(ctx.exception.extension, "txt")

    def test_unsupported_extension_names_it(self):
        with self.assertRaises(UnsupportedFormatError) as ctx:
            decode(DocumentFile("resume.rtf", b"{\\rtf1 hello}"))
        self.assertEqual(ctx.exception.extension, "rtf")
        self.assertIn("rtf", str(ctx.exception))

    def test_decode_path_reads_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "resume.txt"
            path.write_text("Jane Doe", encoding="utf-8")
            self.assertEqual(decode_path(str(path)), "Jane Doe")


class DocxDecodeTests(unittest.TestCase):
    def test_paragraphs_become_lines(self):
        content = make_docx(paragraph("Jane Doe") + paragraph("Senior Engineer"))
        self.assertEqual(decode(DocumentFile("resume.docx", content)), "Jane Doe\nSenior Engineer")

    def test_runs_are_merged(self):
        body = (
            "<w:p><w:r><w:t>Name: {{na</w:t></w:r><w:r><w:t>me}}</w:t></w:r></w:p>"
        )
        text = decode(DocumentFile("template.docx", make_docx(body)))
        self.assertEqual(text, "Name: {{name}}")

    def test_table_cells_contribute_lines(self):
        body = (
            "<w:tbl><w:tr>"
            f"<w:tc>{paragraph('Python')}</w:tc><w:tc>{paragraph('Django')}</w:tc>"
            "</w:tr></w:tbl>"
        )
        text = decode(DocumentFile("resume.docx", make_docx(body)))
        self.assertEqual(text.splitlines(), ["Python", "Django"])

    def test_html_keeps_headings_bold_and_lists(self):
        body = (
            paragraph("Jane Doe", style="Title")
            + paragraph("Experience", style="Heading2")
            + paragraph("Acme &amp; Co", bold=True)
            + paragraph("Python", numbered=True)
            + paragraph("Docker", numbered=True)
            + paragraph("")
        )
        html = decode(DocumentFile("resume.docx", make_docx(body)), as_html=True)
        self.assertIn("<h1>Jane Doe</h1>", html)
        self.assertIn("<h2>Experience</h2>", html)
        self.assertIn("<p><strong>Acme &amp; Co</strong></p>", html)
        self.assertIn("<ul><li>Python</li><li>Docker</li></ul>", html)
        self.assertNotIn("<p></p>", html)

    def test_legacy_doc_binary_fails_to_decode(self):
        with self.assertRaises(DecodeFailureError) as ctx:
            decode(DocumentFile("resume.doc", b"\xd0\xcf\x11\xe0 not ooxml"))
        self.assertEqual(ctx.exception.extension, "doc")
        self.assertIsInstance(ctx.exception.cause, zipfile.BadZipFile)

    def test_package_without_document_part(self):
        buf = io.BytesIO()
        with zipfile.ZipFile(buf, "w") as z:
            z.writestr("word/styles.xml", "<styles/>")
        with self.assertRaises(DecodeFailureError):
            decode(DocumentFile("resume.docx", buf.getvalue()))

    def test_docx_without_text_is_empty(self):
        with self.assertRaises(EmptyDocumentError):
            decode(DocumentFile("resume.docx", make_docx(paragraph("   "))))


class PdfDecodeTests(unittest.TestCase):
    def test_blank_page_is_empty_document(self):
        with self.assertRaises(EmptyDocumentError) as ctx:
            decode(DocumentFile("scan.pdf", blank_pdf()))
        self.assertEqual(ctx.exception.extension, "pdf")

    def test_garbage_bytes_fail_to_decode(self):
        with self.assertRaises(DecodeFailureError):
            decode(DocumentFile("resume.pdf", b"not a pdf at all"))

    @patch("services.documents.readers.PyPDF2.PdfReader")
    def test_pages_are_normalized_and_joined(self, mock_reader):
        reader = MagicMock()
        reader.is_encrypted = False
        reader.pages = [
            mock_page("John   Smith\n(cid:12)Senior  Engineer\n\n"),
            mock_page("Skills\nPython"),
        ]
        mock_reader.return_value = reader

        text = decode(DocumentFile("resume.pdf", b"%PDF-fake"))

        self.assertEqual(text, "John Smith\nSenior Engineer\nSkills\nPython")

    @patch("services.documents.readers.pdfplumber.open")
    @patch("services.documents.readers.PyPDF2.PdfReader")
    def test_falls_back_to_pdfplumber(self, mock_reader, mock_open):
        mock_reader.side_effect = ValueError("broken xref")
        pdf = MagicMock()
        pdf.pages = [mock_page("Jane Doe"), mock_page(None)]
        mock_open.return_value.__enter__.return_value = pdf

        text = decode(DocumentFile("resume.pdf", b"%PDF-fake"))

        self.assertEqual(text, "Jane Doe\n")
        mock_open.assert_called_once()


if __name__ == "__main__":
    unittest.main()
