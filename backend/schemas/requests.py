from pydantic import BaseModel, ConfigDict
from typing import Optional


class ResumeUpdateRequest(BaseModel):
    """Partial edit of a resume session's fields.

    Only the fields sent are changed; null clears a field.
    """
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    linkedin: Optional[str] = None
    summary: Optional[str] = None
    experience: Optional[str] = None
    education: Optional[str] = None
    skills: Optional[str] = None
    projects: Optional[str] = None
    certifications: Optional[str] = None
    languages: Optional[str] = None
    achievements: Optional[str] = None
    references: Optional[str] = None

    def to_updates(self) -> dict[str, str]:
        return {
            key: value or ""
            for key, value in self.model_dump(exclude_unset=True).items()
        }
