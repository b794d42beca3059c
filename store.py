"""
Candidate record store backed by SQLAlchemy.

Every method runs in its own short session, so each create/update/delete is
atomic for a single record. Returned Candidate objects are detached.
Driver errors are logged and re-raised as PersistenceFailure.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from errors import NotFoundError, PersistenceFailure
from models import Base, Candidate

logger = logging.getLogger(__name__)

MAX_SKILLS = 50


def make_engine(database_url: str) -> Engine:
    kwargs: Dict[str, Any] = {"future": True, "pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        # FastAPI runs sync routes in a threadpool
        kwargs["connect_args"] = {"check_same_thread": False}
    return create_engine(database_url, **kwargs)


class CandidateStore:
    def __init__(self, engine: Engine):
        self.engine = engine
        self._Session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False, future=True)

    def create_tables(self) -> None:
        Base.metadata.create_all(self.engine)

    @contextmanager
    def _session(self) -> Iterator[Session]:
        session = self._Session()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.exception(f"Record store failure: {e}")
            raise PersistenceFailure("Database error") from e
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    # ----------------- writes -----------------

    def create(
        self,
        *,
        file_name: str,
        raw_text: Optional[str],
        stored_file_name: Optional[str] = None,
        candidate_name: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        skills: Optional[List[str]] = None,
        experience: Optional[str] = None,
        education: Optional[str] = None,
    ) -> Candidate:
        row = Candidate(
            file_name=file_name,
            stored_file_name=stored_file_name,
            raw_text=raw_text,
            candidate_name=candidate_name,
            email=email,
            phone=phone,
            skills=list(skills or [])[:MAX_SKILLS],
            experience=experience,
            education=education,
        )
        with self._session() as s:
            s.add(row)
        return row

    def update_score(
        self,
        candidate_id: str,
        score: int,
        justification: str,
        role_applied: Optional[str] = None,
    ) -> Candidate:
        """Overwrite score + justification (+ role) of one record."""
        with self._session() as s:
            row = s.get(Candidate, candidate_id)
            if row is None:
                raise NotFoundError("Resume not found")
            row.match_score = int(score)
            row.justification = justification
            row.role_applied = role_applied
        return row

    def delete(self, candidate_id: str) -> Candidate:
        with self._session() as s:
            row = s.get(Candidate, candidate_id)
            if row is None:
                raise NotFoundError("Resume not found")
            s.delete(row)
        return row

    # ----------------- reads -----------------

    def get(self, candidate_id: str) -> Candidate:
        with self._session() as s:
            row = s.get(Candidate, candidate_id)
        if row is None:
            raise NotFoundError("Resume not found")
        return row

    def list_all(self) -> List[Candidate]:
        """Best score first (unscored last), newest first within a score."""
        with self._session() as s:
            return (
                s.query(Candidate)
                .order_by(
                    Candidate.match_score.is_(None),
                    Candidate.match_score.desc(),
                    Candidate.created_at.desc(),
                )
                .all()
            )

    def list_shortlisted(self, threshold: int) -> List[Candidate]:
        with self._session() as s:
            return (
                s.query(Candidate)
                .filter(Candidate.match_score.isnot(None), Candidate.match_score >= threshold)
                .order_by(Candidate.match_score.desc(), Candidate.created_at.desc())
                .all()
            )
