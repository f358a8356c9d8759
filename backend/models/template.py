from pydantic import BaseModel, Field
from datetime import datetime


class TemplateInfo(BaseModel):
    id: str
    name: str
    description: str = ""
    badge: str = ""
    accent_color: str = "#6366f1"
    features: list[str] = []
    is_custom: bool = False


class CustomTemplate(BaseModel):
    """A template document uploaded by the user."""
    id: str
    name: str
    filename: str
    content: bytes = Field(repr=False)
    uploaded_at: datetime = Field(default_factory=datetime.utcnow)

    def to_info(self) -> TemplateInfo:
        return TemplateInfo(
            id=self.id,
            name=self.name,
            description=f"Custom template uploaded from {self.filename}",
            badge="Custom",
            accent_color="#10b981",
            is_custom=True,
        )
