"""Errors raised while resolving and filling resume templates."""

from typing import Optional


class TemplateError(Exception):
    """Base class for template failures."""


class TemplateEmptyError(TemplateError):
    """The decoded template holds no text."""

    def __init__(self, template_name: str = ""):
        target = f" {template_name}" if template_name else ""
        super().__init__(f"No content found in template{target}")
        self.template_name = template_name


class TemplateNotFoundError(TemplateError):
    """No built-in or uploaded template has the requested id."""

    def __init__(self, template_id: str):
        super().__init__(f"Template not found: {template_id}")
        self.template_id = template_id


class TemplateProcessingError(TemplateError):
    """Decoding or substituting a custom template failed."""

    def __init__(self, template_name: str, cause: Optional[BaseException] = None):
        detail = f": {cause}" if cause else ""
        super().__init__(
            f"Failed to process template {template_name}{detail}. "
            "Please ensure it contains valid placeholders."
        )
        self.template_name = template_name
        self.cause = cause
