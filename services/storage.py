"""
Storage service - keeps resumes, jobs, applications and suggestions as JSON
files in the data directory, one file per collection.
"""

import os
import json
import threading
from datetime import datetime, timezone
from typing import Callable, List, Optional, Type, TypeVar

from pydantic import BaseModel

# Local imports
from models import (
    AISuggestion,
    Application,
    ApplicationStats,
    ApplicationStatus,
    Job,
    NewApplication,
    NewJob,
    Resume,
)
from utils import ensure_directory_exists

RecordT = TypeVar("RecordT", bound=BaseModel)


class JsonStore:
    """File-backed record store. Ids are incremental integers per collection."""

    COLLECTIONS = {
        "resumes": Resume,
        "jobs": Job,
        "applications": Application,
        "suggestions": AISuggestion,
    }

    def __init__(self, data_dir: str):
        self.data_dir = data_dir
        self._lock = threading.Lock()
        ensure_directory_exists(data_dir)

    # ------------------------------------------------------------------
    # Resumes
    # ------------------------------------------------------------------

    def create_resume(self, content: str, file_name: Optional[str] = None, field: Optional[str] = None) -> Resume:
        return self._insert("resumes", lambda new_id: Resume(
            id=new_id,
            original_content=content,
            file_name=file_name,
            field=field,
            created_at=_now(),
        ))

    def get_resumes(self) -> List[Resume]:
        return self._list("resumes")

    def get_resume(self, resume_id: int) -> Optional[Resume]:
        return self._get("resumes", resume_id)

    def update_resume(self, resume_id: int, content: str) -> Optional[Resume]:
        return self._update("resumes", resume_id, original_content=content)

    # ------------------------------------------------------------------
    # Jobs
    # ------------------------------------------------------------------

    def create_job(self, job: NewJob) -> Job:
        return self._insert("jobs", lambda new_id: Job(id=new_id, created_at=_now(), **job.model_dump()))

    def get_jobs(self) -> List[Job]:
        return self._list("jobs")

    def get_job(self, job_id: int) -> Optional[Job]:
        return self._get("jobs", job_id)

    # ------------------------------------------------------------------
    # Applications
    # ------------------------------------------------------------------

    def create_application(self, application: NewApplication) -> Application:
        return self._insert("applications", lambda new_id: Application(id=new_id, applied_at=_now(), **application.model_dump()))

    def get_applications(self) -> List[Application]:
        return self._list("applications")

    def get_application(self, application_id: int) -> Optional[Application]:
        return self._get("applications", application_id)

    def update_application_status(self, application_id: int, status: ApplicationStatus) -> Optional[Application]:
        return self._update("applications", application_id, status=ApplicationStatus(status))

    def update_application_cover_letter(self, application_id: int, cover_letter: str) -> Optional[Application]:
        return self._update("applications", application_id, cover_letter=cover_letter)

    def application_stats(self) -> ApplicationStats:
        """Counts applications per status. Response rate is the share that reached interview or offer."""
        applications = self.get_applications()
        counts = {status: 0 for status in ApplicationStatus}
        for application in applications:
            counts[application.status] += 1

        total = len(applications)
        responded = counts[ApplicationStatus.INTERVIEW] + counts[ApplicationStatus.OFFER]
        return ApplicationStats(
            total=total,
            applied=counts[ApplicationStatus.APPLIED],
            interview=counts[ApplicationStatus.INTERVIEW],
            rejected=counts[ApplicationStatus.REJECTED],
            offer=counts[ApplicationStatus.OFFER],
            response_rate=round(responded / total * 100) if total else 0,
        )

    # ------------------------------------------------------------------
    # AI suggestions
    # ------------------------------------------------------------------

    def create_suggestion(self, suggestion_type: str, suggestion: str) -> AISuggestion:
        return self._insert("suggestions", lambda new_id: AISuggestion(
            id=new_id,
            type=suggestion_type,
            suggestion=suggestion,
            created_at=_now(),
        ))

    def get_suggestions(self) -> List[AISuggestion]:
        """Returns suggestions that have not been applied yet."""
        return [s for s in self._list("suggestions") if not s.applied]

    def mark_suggestion_applied(self, suggestion_id: int) -> Optional[AISuggestion]:
        return self._update("suggestions", suggestion_id, applied=True)

    # ============================================================================
    # HELPER FUNCTIONS
    # ============================================================================

    def _path(self, collection: str) -> str:
        return os.path.join(self.data_dir, f"{collection}.json")

    def _load(self, collection: str) -> list:
        model: Type[BaseModel] = self.COLLECTIONS[collection]
        path = self._path(collection)
        if not os.path.exists(path):
            return []
        with open(path, "r", encoding="utf-8") as f:
            return [model.model_validate(record) for record in json.load(f)]

    def _save(self, collection: str, records: list) -> None:
        """Writes to a temp file first so a failed write never truncates the collection."""
        path = self._path(collection)
        tmp_path = f"{path}.tmp"
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump([r.model_dump(mode="json", by_alias=True) for r in records], f, indent=4)
            os.replace(tmp_path, path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def _insert(self, collection: str, build: Callable[[int], RecordT]) -> RecordT:
        with self._lock:
            records = self._load(collection)
            new_id = max((r.id for r in records), default=0) + 1
            record = build(new_id)
            records.append(record)
            self._save(collection, records)
            return record

    def _list(self, collection: str) -> list:
        with self._lock:
            records = self._load(collection)
        return sorted(records, key=lambda r: r.id, reverse=True)

    def _get(self, collection: str, record_id: int):
        with self._lock:
            records = self._load(collection)
        return next((r for r in records if r.id == record_id), None)

    def _update(self, collection: str, record_id: int, **changes):
        with self._lock:
            records = self._load(collection)
            for index, record in enumerate(records):
                if record.id == record_id:
                    # model_copy skips validation; a bad value must fail here, not at the next load
                    updated = type(record).model_validate({**record.model_dump(), **changes})
                    records[index] = updated
                    self._save(collection, records)
                    return updated
        return None


def _now() -> datetime:
    return datetime.now(timezone.utc)
