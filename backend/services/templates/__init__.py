"""Template Substitution Engine

Fills built-in or uploaded resume templates with ResumeRecord data.

Usage:
    from services.templates import apply_template, process_template

    text = apply_template("Name: {{name}}\\nPhone: {{phone}}", record)
    html = process_template(DocumentFile("template.docx", data), record)
"""

from .exceptions import (
    TemplateError,
    TemplateEmptyError,
    TemplateNotFoundError,
    TemplateProcessingError,
)

from .placeholders import (
    FIELD_ALIASES,
    FIELD_PLACEHOLDERS,
    DATE_PLACEHOLDER,
    placeholder_names,
    placeholder_help,
)

from .processor import (
    apply_template,
    create_html_document,
    format_date,
    process_template,
    render_custom_template,
)

from .rendering import render_layout

from .store import (
    BUILTIN_TEMPLATES,
    TemplateStore,
    get_template_store,
    is_custom_template_id,
)


__all__ = [
    # Errors
    "TemplateError",
    "TemplateEmptyError",
    "TemplateNotFoundError",
    "TemplateProcessingError",
    # Placeholders
    "FIELD_ALIASES",
    "FIELD_PLACEHOLDERS",
    "DATE_PLACEHOLDER",
    "placeholder_names",
    "placeholder_help",
    # Substitution
    "apply_template",
    "create_html_document",
    "format_date",
    "process_template",
    "render_custom_template",
    "render_layout",
    # Store
    "BUILTIN_TEMPLATES",
    "TemplateStore",
    "get_template_store",
    "is_custom_template_id",
]
