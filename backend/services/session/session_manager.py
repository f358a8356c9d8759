from typing import Optional
from datetime import datetime
from functools import lru_cache
import logging
import threading

from models.resume import RESUME_FIELDS, ConfidenceMap, ResumeRecord
from models.session import ResumeSession
from services.parser.confidence import score_field


logger = logging.getLogger(__name__)


class SessionManager:
    """In-memory session storage for uploaded resumes.

    Thread-safe implementation for managing resume sessions.
    For production, replace with Redis or database-backed storage.
    """

    def __init__(self):
        self._sessions: dict[str, ResumeSession] = {}
        self._lock = threading.Lock()

    def create_session(
        self,
        record: ResumeRecord,
        confidence: Optional[ConfidenceMap] = None,
        filename: str = "",
        method: str = "local",
    ) -> ResumeSession:
        """Create a new resume session.

        Args:
            record: Extracted resume data.
            confidence: Per-field confidence map.
            filename: Name of the uploaded file.
            method: Extraction strategy that produced the record.

        Returns:
            New ResumeSession instance.
        """
        session = ResumeSession(
            filename=filename,
            method=method,
            record=record,
            confidence=dict(confidence or {}),
        )

        with self._lock:
            self._sessions[session.session_id] = session

        return session

    def get_session(self, session_id: str) -> Optional[ResumeSession]:
        """Get a session by ID.

        Args:
            session_id: The session ID.

        Returns:
            ResumeSession if found, None otherwise.
        """
        with self._lock:
            return self._sessions.get(session_id)

    def update_fields(self, session_id: str, updates: dict[str, str]) -> Optional[ResumeSession]:
        """Apply user edits to a session's record.

        Values are stripped and re-scored, so an emptied field drops to
        confidence 0. The stored record is replaced, never mutated.

        Args:
            session_id: The session ID.
            updates: Field name to new value.

        Returns:
            The updated session, or None if not found.

        Raises:
            ValueError: If a key is not a record field or a value is not a string.
        """
        for key, value in updates.items():
            if key not in RESUME_FIELDS:
                raise ValueError(f"Unknown resume field: {key}")
            if not isinstance(value, str):
                raise ValueError(f"Value for {key} must be a string")
        cleaned = {key: value.strip() for key, value in updates.items()}

        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None

            record = session.record.model_copy(update=cleaned)
            confidence = dict(session.confidence)
            for key, value in cleaned.items():
                confidence[key] = score_field(key, value)

            updated = session.model_copy(update={
                "record": record,
                "confidence": confidence,
                "updated_at": datetime.utcnow(),
            })
            self._sessions[session_id] = updated
            return updated

    def delete_session(self, session_id: str) -> bool:
        """Delete a session by ID.

        Args:
            session_id: The session ID.

        Returns:
            True if deleted, False if not found.
        """
        with self._lock:
            if session_id in self._sessions:
                del self._sessions[session_id]
                return True
            return False

    def list_sessions(self) -> list[ResumeSession]:
        with self._lock:
            return list(self._sessions.values())

    def cleanup_expired(self, max_age_minutes: int = 60) -> int:
        """Clean up sessions not touched for a while.

        Args:
            max_age_minutes: Maximum age in minutes since the last edit.

        Returns:
            Number of sessions cleaned up.
        """
        now = datetime.utcnow()

        with self._lock:
            expired = [
                sid for sid, session in self._sessions.items()
                if (now - session.updated_at).total_seconds() > max_age_minutes * 60
            ]
            for sid in expired:
                del self._sessions[sid]

        if expired:
            logger.info(f"Cleaned up {len(expired)} expired resume sessions")
        return len(expired)


# Singleton instance
_session_manager: Optional[SessionManager] = None


@lru_cache()
def get_session_manager() -> SessionManager:
    """Get the singleton session manager instance."""
    global _session_manager
    if _session_manager is None:
        _session_manager = SessionManager()
    return _session_manager
