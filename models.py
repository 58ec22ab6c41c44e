# Standard library imports
from datetime import datetime
from enum import Enum
from typing import Generic, List, Optional, TypeVar

# Third-party imports
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

# --------------------------------------------------------------------------
# Workflow Data Models
# --------------------------------------------------------------------------

class Tone(str, Enum):
    """Stylistic instruction applied to cover-letter generation."""
    PROFESSIONAL = "professional"
    ENTHUSIASTIC = "enthusiastic"
    CONVERSATIONAL = "conversational"
    FORMAL = "formal"

    @classmethod
    def coerce(cls, value: Optional[str]) -> "Tone":
        """Maps a raw tone value to a Tone, falling back to PROFESSIONAL."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.PROFESSIONAL


class MatchAnalysisResult(BaseModel):
    """ATS compatibility of a resume against a job description."""
    model_config = ConfigDict(populate_by_name=True)

    match_score: int = Field(0, ge=0, le=100, alias="matchScore", description="How well the resume matches the job, 0 to 100.")
    missing_keywords: List[str] = Field(default_factory=list, alias="missingKeywords")
    strong_matches: List[str] = Field(default_factory=list, alias="strongMatches")
    suggestions: List[str] = Field(default_factory=list)


class ParseOutcome(BaseModel, Generic[T]):
    """Tagged result of interpreting raw completion output."""
    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: T) -> "ParseOutcome[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "ParseOutcome[T]":
        return cls(ok=False, error=error)

# --------------------------------------------------------------------------
# Stored Records
# --------------------------------------------------------------------------

class ApplicationStatus(str, Enum):
    APPLIED = "applied"
    INTERVIEW = "interview"
    REJECTED = "rejected"
    OFFER = "offer"


class Resume(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    original_content: str = Field(alias="originalContent")
    file_name: Optional[str] = Field(None, alias="fileName")
    field: Optional[str] = None
    created_at: datetime = Field(alias="createdAt")


class Job(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    url: Optional[str] = None
    created_at: datetime = Field(alias="createdAt")


class NewJob(BaseModel):
    """Validated payload for creating a job."""
    title: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    url: Optional[str] = None


class Application(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    job_id: Optional[int] = Field(None, alias="jobId")
    resume_id: Optional[int] = Field(None, alias="resumeId")
    status: ApplicationStatus = ApplicationStatus.APPLIED
    match_score: Optional[int] = Field(None, ge=0, le=100, alias="matchScore")
    tailored_resume_content: Optional[str] = Field(None, alias="tailoredResumeContent")
    cover_letter: Optional[str] = Field(None, alias="coverLetter")
    notes: Optional[str] = None
    applied_at: datetime = Field(alias="appliedAt")
    follow_up_date: Optional[datetime] = Field(None, alias="followUpDate")


class NewApplication(BaseModel):
    """Validated payload for creating an application."""
    model_config = ConfigDict(populate_by_name=True)

    job_id: Optional[int] = Field(None, alias="jobId")
    resume_id: Optional[int] = Field(None, alias="resumeId")
    status: ApplicationStatus = ApplicationStatus.APPLIED
    match_score: Optional[int] = Field(None, ge=0, le=100, alias="matchScore")
    tailored_resume_content: Optional[str] = Field(None, alias="tailoredResumeContent")
    cover_letter: Optional[str] = Field(None, alias="coverLetter")
    notes: Optional[str] = None
    follow_up_date: Optional[datetime] = Field(None, alias="followUpDate")


class AISuggestion(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    type: str
    suggestion: str
    applied: bool = False
    created_at: datetime = Field(alias="createdAt")


class ApplicationStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int = 0
    applied: int = 0
    interview: int = 0
    rejected: int = 0
    offer: int = 0
    response_rate: int = Field(0, alias="responseRate")
