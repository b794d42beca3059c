import json
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String, Text, TypeDecorator
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex


class JSONType(TypeDecorator):
    """Custom JSON type that works reliably with SQLite."""
    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        """Convert Python object to JSON string for storage."""
        if value is None:
            return None
        return json.dumps(value)

    def process_result_value(self, value, dialect):
        """Convert JSON string back to Python object."""
        if value is None:
            return None
        return json.loads(value)


class Candidate(Base):
    __tablename__ = "candidates"
    id = Column(String(32), primary_key=True, default=_new_id)
    file_name = Column(String, nullable=False)
    stored_file_name = Column(String, nullable=True)
    raw_text = Column(Text, nullable=True)

    # derived once at ingestion
    candidate_name = Column(String, nullable=True)
    email = Column(String, nullable=True, index=True)
    phone = Column(String, nullable=True)
    skills = Column(JSONType, nullable=False, default=list)
    experience = Column(String, nullable=True)
    education = Column(Text, nullable=True)

    # written only by scoring; score and justification travel together
    match_score = Column(Integer, nullable=True)
    justification = Column(Text, nullable=True)
    role_applied = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    def __repr__(self) -> str:
        return f"<Candidate id={self.id} file={self.file_name} score={self.match_score}>"
