"""
Ingestion and scoring operations.

Ingestion: validate upload -> PDF text -> field extraction -> keep file -> store record.
Scoring:   load record -> fallback chain -> overwrite score/justification/role.
"""

from __future__ import annotations

import logging
import os
import re
import uuid
from typing import List, Optional, Tuple

from config import Settings
from errors import UploadTooLarge, ValidationError
from matching.chain import ScoringChain
from matching.result import ScoreResult
from models import Candidate
from parsers.extract import extract_fields
from parsers.jd_extract import extract_role
from parsers.pdf import pdf_to_text
from store import CandidateStore

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


def _safe_filename(original: str) -> str:
    base = re.sub(r"[^A-Za-z0-9._-]", "_", original)
    return f"{uuid.uuid4().hex[:8]}_{base}"


def is_pdf_upload(file_name: Optional[str], content_type: Optional[str]) -> bool:
    return content_type == PDF_CONTENT_TYPE or bool(re.search(r"\.pdf$", file_name or "", re.IGNORECASE))


class CandidateService:
    def __init__(self, store: CandidateStore, chain: ScoringChain, settings: Settings):
        self.store = store
        self.chain = chain
        self.settings = settings
        self.upload_dir = settings.resolved_upload_dir

    # ----------------- ingestion -----------------

    def ingest(self, file_name: Optional[str], content_type: Optional[str], data: bytes) -> Candidate:
        if not file_name or not data:
            raise ValidationError("No file uploaded")
        if not is_pdf_upload(file_name, content_type):
            raise ValidationError("Only PDF files are allowed")
        if len(data) > self.settings.max_upload_bytes:
            raise UploadTooLarge(f"File exceeds the {self.settings.max_upload_bytes} byte upload limit")

        text = pdf_to_text(data)
        fields = extract_fields(text)

        os.makedirs(self.upload_dir, exist_ok=True)
        stored_name = _safe_filename(file_name)
        path = os.path.join(self.upload_dir, stored_name)
        with open(path, "wb") as f:
            f.write(data)

        try:
            row = self.store.create(file_name=file_name, raw_text=text, stored_file_name=stored_name, **fields)
        except Exception:
            self._remove_file(stored_name)
            raise

        found = [k for k, v in fields.items() if v]
        logger.info(f"Ingested {file_name} as {row.id}; found: {', '.join(found) or 'nothing'}")
        return row

    # ----------------- scoring -----------------

    def score(self, candidate_id: Optional[str], job_description: Optional[str]) -> Tuple[Candidate, ScoreResult]:
        candidate_id = (candidate_id or "").strip()
        job_description = (job_description or "").strip()
        if not candidate_id or not job_description:
            raise ValidationError("resumeId and jobDescription are required")

        row = self.store.get(candidate_id)
        if not (row.raw_text or "").strip():
            raise ValidationError("Resume has no extracted text to score")

        result = self.chain.score(row.raw_text, job_description)
        updated = self.store.update_score(
            candidate_id,
            result.score,
            result.justification,
            role_applied=extract_role(job_description),
        )
        return updated, result

    # ----------------- queries / delete -----------------

    def get(self, candidate_id: str) -> Candidate:
        return self.store.get(candidate_id)

    def list_all(self) -> List[Candidate]:
        return self.store.list_all()

    def list_shortlisted(self, threshold: Optional[int] = None) -> List[Candidate]:
        return self.store.list_shortlisted(self.settings.shortlist_threshold if threshold is None else threshold)

    def delete(self, candidate_id: str) -> Candidate:
        row = self.store.delete(candidate_id)
        if row.stored_file_name:
            self._remove_file(row.stored_file_name)
        logger.info(f"Deleted candidate {candidate_id}")
        return row

    def _remove_file(self, stored_name: str) -> None:
        path = os.path.join(self.upload_dir, stored_name)
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Could not remove {path}: {e}")
