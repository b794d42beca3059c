from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# Stored candidate as returned by the API (raw text is never echoed back)
class CandidateOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    file_name: str
    candidate_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    skills: List[str] = []
    experience: Optional[str] = None
    education: Optional[str] = None
    match_score: Optional[int] = None
    justification: Optional[str] = None
    role_applied: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


# Scoring request; accepts the camelCase keys the browser client sends
class ScoreRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume_id: Optional[str] = Field(default=None, alias="resumeId")
    job_description: Optional[str] = Field(default=None, alias="jobDescription")


class ScoreOut(BaseModel):
    id: str
    candidate_name: Optional[str] = None
    match_score: int
    justification: str
    source: str
    role_applied: Optional[str] = None


class DeleteOut(BaseModel):
    deleted: bool
    id: str
