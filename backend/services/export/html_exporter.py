import re
from datetime import date
from typing import Optional

from models.resume import ResumeRecord
from models.template import CustomTemplate, TemplateInfo
from services.documents import DocumentFile
from services.templates import get_template_store, render_custom_template, render_layout
from services.templates.store import TemplateStore


# Rendered in this order; empty sections are skipped.
SECTION_TITLES: tuple[tuple[str, str], ...] = (
    ("Professional Summary", "summary"),
    ("Work Experience", "experience"),
    ("Education", "education"),
    ("Skills", "skills"),
    ("Projects", "projects"),
    ("Certifications", "certifications"),
    ("Languages", "languages"),
    ("Achievements", "achievements"),
    ("References", "references"),
)

# Older forms filled untouched fields with this instead of leaving them blank
_NOT_MENTIONED = "not mentioned"


def _present(value: str) -> bool:
    return bool(value.strip()) and value.strip().lower() != _NOT_MENTIONED


_SAFE_URL_RE = re.compile(r"https?://", re.IGNORECASE)


def _links(data: dict) -> list[tuple[str, str]]:
    """(href, label) pairs; href is empty unless the value is an http(s) URL."""
    links = []
    for field, label in (("website", None), ("linkedin", "LinkedIn")):
        value = data[field].strip()
        if not _present(value):
            continue
        if _SAFE_URL_RE.match(value):
            links.append((value, label or value))
        else:
            links.append(("", value))
    return links


def _split_skills(skills: str) -> list[str]:
    parts = skills.replace("\n", ",").replace(";", ",").split(",")
    return [part.strip(" •-\t") for part in parts if part.strip(" •-\t")]


def render_builtin_html(template: TemplateInfo, record: ResumeRecord) -> str:
    """Render a record with one of the built-in templates.

    Args:
        template: Catalogue entry (supplies id and accent colour)
        record: Resume data

    Returns:
        Self-contained HTML document
    """
    data = record.model_dump()
    contact = [data[key] for key in ("email", "phone", "location") if _present(data[key])]
    sections = [(title, field) for title, field in SECTION_TITLES if _present(data[field])]
    return render_layout(
        "resume.html",
        r=data,
        template=template,
        contact=contact,
        sections=sections,
        skills=_split_skills(data["skills"]),
        links=_links(data),
    )


def render_resume_html(
    template_id: str,
    record: ResumeRecord,
    store: Optional[TemplateStore] = None,
    today: Optional[date] = None,
) -> str:
    """Render a record with a built-in or uploaded template.

    Raises:
        TemplateNotFoundError: If the template id is unknown
        TemplateEmptyError: If a custom template holds no text
        TemplateProcessingError: If a custom template cannot be filled
    """
    store = store or get_template_store()
    template = store.get(template_id)
    if isinstance(template, CustomTemplate):
        file = DocumentFile(template.filename, template.content)
        return render_custom_template(file, record, today=today)
    return render_builtin_html(template, record)
