"""Template substitution engine.

Fills a template's placeholders from a ResumeRecord, removes placeholders
that have no value (together with the label line they sat on), and tidies
the markup left behind.

Substituted values are parked behind private-use markers until cleanup has
finished, so cleanup only ever sees template text and never rewrites a
candidate's own content.
"""

import html as html_lib
import logging
import re
from datetime import date
from functools import lru_cache
from typing import List, Mapping, Optional, Union

from config import get_settings
from models.resume import RESUME_FIELDS, ResumeRecord
from services.documents import DocumentFile, EmptyDocumentError, decode

from .exceptions import TemplateEmptyError, TemplateError, TemplateProcessingError
from .placeholders import DATE_PLACEHOLDER, FIELD_PLACEHOLDERS, UNMATCHED_PLACEHOLDER
from .rendering import render_layout


logger = logging.getLogger(__name__)

WORD_TEMPLATE_EXTENSIONS = ("docx", "doc")

_MARK_OPEN = "\ue000"
_MARK_CLOSE = "\ue001"
_MARK_RE = re.compile(f"{_MARK_OPEN}(\\d+){_MARK_CLOSE}")

_HTML_HINT_RE = re.compile(
    r"<(?:p|div|table|tr|td|h[1-6]|ul|ol|li|br|span|body|html)\b[^>]*>", re.IGNORECASE
)

_LABEL = r"[A-Za-z][A-Za-z /&'()\-]*:"
_INLINE_LABEL = r"\b[A-Za-z]+:"
_SEPARATOR = r"[|\u2022\u00b7]"
_INLINE_OPEN = r"(?:<(?:strong|b|em|i|u|span)\b[^>]*>)"
_INLINE_CLOSE = r"(?:</(?:strong|b|em|i|u|span)>)"

_EMPTY_ELEMENT_RE = re.compile(
    r"<(p|li|h[1-6]|strong|b|em|i|u|span)\b[^>]*>\s*</\1>\n?", re.IGNORECASE
)
_EMPTY_ROW_RE = re.compile(r"<tr\b[^>]*>\s*(?:<td\b[^>]*>\s*</td>\s*)*</tr>", re.IGNORECASE)
_EMPTY_CELL_RE = re.compile(r"<td(\b[^>]*)>\s*</td>", re.IGNORECASE)
_EMPTY_CONTAINER_RE = re.compile(r"<(ul|ol|table)\b[^>]*>\s*</\1>\n?", re.IGNORECASE)
_SPACE_RUN_RE = re.compile(r"[ \t]{3,}")
_BLANK_LINES_RE = re.compile(r"\n[ \t]*\n(?:[ \t]*\n)+")
_LABEL_ONLY_RE = re.compile(rf"^[ \t]*{_LABEL}[ \t]*$")


def looks_like_html(text: str) -> bool:
    return bool(_HTML_HINT_RE.search(text))


def format_date(today: Optional[date] = None) -> str:
    """Current date in the configured short format."""
    return (today or date.today()).strftime(get_settings().date_format)


@lru_cache(maxsize=64)
def _removal_patterns(token: str, html: bool) -> tuple[re.Pattern, re.Pattern]:
    """(whole-line, inline) patterns that delete an empty placeholder."""
    if html:
        block = re.compile(
            rf"<(p|li|h[1-6])\b[^>]*>\s*"
            rf"(?:{_INLINE_OPEN}*[ \t]*{_LABEL}[ \t]*{_INLINE_CLOSE}*[ \t]*)?"
            rf"{_INLINE_OPEN}*[ \t]*{token}[ \t]*{_INLINE_CLOSE}*"
            rf"\s*</\1>\n?",
            re.IGNORECASE,
        )
    else:
        # An unlabelled placeholder line also takes a "Label:" line above it.
        block = re.compile(
            rf"^(?:[ \t]*{_LABEL}[ \t]*\n[ \t]*|[ \t]*(?:{_LABEL}[ \t]*)?)"
            rf"{token}[ \t]*(?:\n|$)",
            re.IGNORECASE | re.MULTILINE,
        )
    inline = re.compile(
        # last item on the line: drop the separator and label before it
        rf"[ \t]*(?:{_SEPARATOR}[ \t]*|,[ \t]*)?(?:{_INLINE_LABEL}[ \t]*)?{token}[ \t]*(?=\n|$)"
        # labelled item followed by a separator
        rf"|{_INLINE_LABEL}[ \t]*{token}[ \t]*{_SEPARATOR}[ \t]*"
        rf"|{token}[ \t]*(?:{_SEPARATOR}[ \t]*|,[ \t]*)?",
        re.IGNORECASE | re.MULTILINE,
    )
    return block, inline


def _remove_token(text: str, pattern: re.Pattern, html: bool) -> str:
    block, inline = _removal_patterns(pattern.pattern, html)
    return inline.sub("", block.sub("", text))


def _format_value(value: str, html: bool) -> str:
    value = value.strip()
    if html:
        return html_lib.escape(value, quote=False).replace("\n", "<br />")
    return value


def _park(values: List[str], value: str) -> str:
    values.append(value)
    return f"{_MARK_OPEN}{len(values) - 1}{_MARK_CLOSE}"


def _strip_label_lines(text: str) -> str:
    # A "Label:" line survives only when real content follows it directly.
    kept: List[str] = []
    next_is_content = False
    for line in reversed(text.split("\n")):
        is_label = bool(_LABEL_ONLY_RE.match(line))
        if is_label and not next_is_content:
            continue
        kept.append(line)
        next_is_content = bool(line.strip()) and not is_label
    return "\n".join(reversed(kept))


def _collapse_empty_markup(text: str) -> str:
    previous = None
    while previous != text:
        previous = text
        text = _EMPTY_ELEMENT_RE.sub("", text)
        text = _EMPTY_ROW_RE.sub("", text)
        text = _EMPTY_CONTAINER_RE.sub("", text)
    return _EMPTY_CELL_RE.sub(r"<td\1></td>", text)


def _cleanup(text: str, html: bool) -> str:
    text = _remove_token(text, UNMATCHED_PLACEHOLDER, html)
    if html:
        text = _collapse_empty_markup(text)
    text = _SPACE_RUN_RE.sub("  ", text)
    text = _BLANK_LINES_RE.sub("\n\n", text)
    if not html:
        text = _BLANK_LINES_RE.sub("\n\n", _strip_label_lines(text))
    return text.strip()


def apply_template(
    template_text: str,
    record: Union[ResumeRecord, Mapping[str, str]],
    *,
    today: Optional[date] = None,
    html: Optional[bool] = None,
) -> str:
    """Fill a template with resume data.

    Args:
        template_text: Decoded template (plain text or an HTML fragment)
        record: Resume data; mappings are read like ResumeRecord.from_partial
        today: Date used for {{date}} (defaults to today)
        html: Treat the template as HTML; detected from the markup when None

    Returns:
        The populated template with unmatched placeholders removed

    Raises:
        TemplateEmptyError: If the template is blank
    """
    if not isinstance(template_text, str):
        raise TypeError(f"Template text must be str, not {type(template_text).__name__}")
    if not template_text.strip():
        raise TemplateEmptyError()
    if not isinstance(record, ResumeRecord):
        record = ResumeRecord.from_partial(dict(record))
    if html is None:
        html = looks_like_html(template_text)

    text = template_text.replace("\r\n", "\n").replace(_MARK_OPEN, "").replace(_MARK_CLOSE, "")
    values: List[str] = []

    for field in RESUME_FIELDS:
        pattern = FIELD_PLACEHOLDERS[field]
        value = getattr(record, field)
        if value.strip():
            marker = _park(values, _format_value(value, html))
            text = pattern.sub(lambda _: marker, text)
        else:
            text = _remove_token(text, pattern, html)

    date_marker = _park(values, _format_value(format_date(today), html))
    text = DATE_PLACEHOLDER.sub(lambda _: date_marker, text)

    text = _cleanup(text, html)
    return _MARK_RE.sub(lambda m: values[int(m.group(1))], text)


def create_html_document(
    content: str,
    template_name: str,
    *,
    today: Optional[date] = None,
    plain_text: bool = False,
) -> str:
    """Wrap populated template content in a self-contained HTML page."""
    return render_layout(
        "custom_document.html",
        content=content,
        template_name=template_name,
        processed_on=format_date(today),
        plain_text=plain_text,
    )


def _fill(file: DocumentFile, record: ResumeRecord, today: Optional[date]) -> tuple[str, bool]:
    is_word = file.extension in WORD_TEMPLATE_EXTENSIONS
    try:
        decoded = decode(file, as_html=is_word)
        output = apply_template(decoded, record, today=today, html=is_word)
    except EmptyDocumentError as e:
        raise TemplateEmptyError(file.filename) from e
    except TemplateError:
        raise
    except Exception as e:
        logger.error(f"Template processing error for {file.filename}: {e}")
        raise TemplateProcessingError(file.filename, e) from e
    return output, is_word


def process_template(
    file: DocumentFile,
    record: ResumeRecord,
    *,
    today: Optional[date] = None,
) -> str:
    """Decode a custom template file and fill it with resume data.

    Word templates are decoded to HTML and returned as a complete HTML
    document; other formats are filled as plain text.

    Raises:
        TemplateEmptyError: If the template holds no text
        TemplateProcessingError: If decoding or substitution fails
    """
    output, is_word = _fill(file, record, today)
    if is_word:
        return create_html_document(output, file.filename, today=today)
    return output


def render_custom_template(
    file: DocumentFile,
    record: ResumeRecord,
    *,
    today: Optional[date] = None,
) -> str:
    """Like process_template, but always returns a complete HTML document."""
    output, is_word = _fill(file, record, today)
    return create_html_document(output, file.filename, today=today, plain_text=not is_word)
