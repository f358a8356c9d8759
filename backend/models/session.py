from pydantic import BaseModel, Field
from datetime import datetime
from uuid import uuid4

from models.resume import ConfidenceMap, ResumeRecord


class ResumeSession(BaseModel):
    """An uploaded resume being edited before export."""
    session_id: str = Field(default_factory=lambda: str(uuid4()))
    filename: str = ""
    method: str = "local"

    record: ResumeRecord = Field(default_factory=ResumeRecord)
    confidence: ConfidenceMap = Field(default_factory=dict)

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
