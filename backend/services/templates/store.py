"""Built-in template catalogue plus user-uploaded custom templates."""

import logging
import re
import threading
import time
from functools import lru_cache
from typing import Optional, Union

from models.template import CustomTemplate, TemplateInfo
from services.documents import DocumentFile, UnsupportedFormatError, detect_file_type

from .exceptions import TemplateNotFoundError


logger = logging.getLogger(__name__)

CUSTOM_PREFIX = "custom-"

BUILTIN_TEMPLATES: tuple[TemplateInfo, ...] = (
    TemplateInfo(
        id="modern-professional",
        name="Modern Professional",
        description="Clean, modern design perfect for corporate roles",
        badge="Popular",
        accent_color="#3b82f6",
        features=["ATS-Friendly", "Clean Layout", "Professional Colors"],
    ),
    TemplateInfo(
        id="creative-designer",
        name="Creative Designer",
        description="Bold and creative layout for design professionals",
        badge="Creative",
        accent_color="#a855f7",
        features=["Visual Impact", "Color Accent", "Portfolio Focus"],
    ),
    TemplateInfo(
        id="executive-premium",
        name="Executive Premium",
        description="Premium template for senior executives and leaders",
        badge="Premium",
        accent_color="#f59e0b",
        features=["Luxury Design", "Executive Style", "Leadership Focus"],
    ),
    TemplateInfo(
        id="academic-scholar",
        name="Academic Scholar",
        description="Traditional academic format for research positions",
        badge="Academic",
        accent_color="#10b981",
        features=["Research Focus", "Publication Ready", "Academic Standards"],
    ),
    TemplateInfo(
        id="minimalist-clean",
        name="Minimalist Clean",
        description="Simple, clean design that highlights your content",
        badge="Minimal",
        accent_color="#64748b",
        features=["Minimal Design", "Content Focus", "Easy Reading"],
    ),
    TemplateInfo(
        id="tech-startup",
        name="Tech Startup",
        description="Modern tech-focused template for startup culture",
        badge="Tech",
        accent_color="#06b6d4",
        features=["Tech Style", "Startup Vibe", "Innovation Focus"],
    ),
)

_EXTENSION_RE = re.compile(r"\.[A-Za-z0-9]+$")


def is_custom_template_id(template_id: str) -> bool:
    return template_id.startswith(CUSTOM_PREFIX)


class TemplateStore:
    """In-memory template registry.

    Thread-safe. Built-in templates are fixed; custom templates live for the
    lifetime of the process.
    """

    def __init__(self):
        self._builtin: dict[str, TemplateInfo] = {t.id: t for t in BUILTIN_TEMPLATES}
        self._custom: dict[str, CustomTemplate] = {}
        self._lock = threading.Lock()

    def list_templates(self) -> list[TemplateInfo]:
        """Built-in templates followed by custom ones, oldest first."""
        with self._lock:
            custom = sorted(self._custom.values(), key=lambda t: t.uploaded_at)
        return list(self._builtin.values()) + [t.to_info() for t in custom]

    def get(self, template_id: str) -> Union[TemplateInfo, CustomTemplate]:
        """Look up a template by id.

        Raises:
            TemplateNotFoundError: If no template has this id.
        """
        if template_id in self._builtin:
            return self._builtin[template_id]
        with self._lock:
            template = self._custom.get(template_id)
        if template is None:
            raise TemplateNotFoundError(template_id)
        return template

    def add_custom(self, file: DocumentFile) -> CustomTemplate:
        """Register an uploaded template document.

        Raises:
            UnsupportedFormatError: If the file is not a decodable format.
        """
        if detect_file_type(file.filename) is None:
            raise UnsupportedFormatError(file.extension)

        with self._lock:
            stamp = int(time.time() * 1000)
            while f"{CUSTOM_PREFIX}{stamp}" in self._custom:
                stamp += 1
            template = CustomTemplate(
                id=f"{CUSTOM_PREFIX}{stamp}",
                name=_EXTENSION_RE.sub("", file.filename) or file.filename,
                filename=file.filename,
                content=file.content,
            )
            self._custom[template.id] = template

        logger.info(f"Registered custom template {template.id} ({file.filename})")
        return template

    def delete_custom(self, template_id: str) -> None:
        """Remove an uploaded template.

        Raises:
            TemplateNotFoundError: If no custom template has this id.
        """
        with self._lock:
            if self._custom.pop(template_id, None) is None:
                raise TemplateNotFoundError(template_id)


# Singleton instance
_template_store: Optional[TemplateStore] = None


@lru_cache()
def get_template_store() -> TemplateStore:
    """Get the singleton template store instance."""
    global _template_store
    if _template_store is None:
        _template_store = TemplateStore()
    return _template_store
