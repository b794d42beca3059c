from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import Depends, FastAPI, File, Query, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from config import Settings, load_settings
from errors import TalentTraceError
from matching.chain import build_scoring_chain
from schemas import CandidateOut, DeleteOut, ScoreOut, ScoreRequest
from service import CandidateService
from store import CandidateStore, make_engine

logger = logging.getLogger(__name__)

SERVICE_NAME = "talentrace"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown: data dirs, database, scoring chain."""
        os.makedirs(settings.base_dir, exist_ok=True)
        os.makedirs(settings.resolved_upload_dir, exist_ok=True)

        engine = make_engine(settings.resolved_database_url)
        store = CandidateStore(engine)
        store.create_tables()
        chain = build_scoring_chain(settings)
        app.state.service = CandidateService(store, chain, settings)
        logger.info(f"Record store: {engine.url.render_as_string(hide_password=True)}")
        logger.info(f"Scoring chain: {' -> '.join(chain.sources)}")

        yield
        engine.dispose()
        logger.info("Application shutting down.")

    app = FastAPI(title="TalentTrace Resume Screener", lifespan=lifespan)
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(TalentTraceError)
    async def domain_error(_request: Request, exc: TalentTraceError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(SQLAlchemyError)
    async def database_error(_request: Request, exc: SQLAlchemyError):
        logger.exception(f"Unhandled database error: {exc}")
        return JSONResponse(status_code=500, content={"detail": "Database error"})

    def get_service(request: Request) -> CandidateService:
        return request.app.state.service

    # -------------------------------------------------------------------
    # Routes
    # -------------------------------------------------------------------
    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/api/status")
    def status():
        return {"service": SERVICE_NAME, "status": "running"}

    @app.post("/api/upload-resume", response_model=CandidateOut, status_code=201)
    async def upload_resume(
        resume: Optional[UploadFile] = File(default=None),
        service: CandidateService = Depends(get_service),
    ):
        """Accept one PDF résumé, extract its fields and store the candidate."""
        file_name = resume.filename if resume is not None else None
        content_type = resume.content_type if resume is not None else None
        # one byte over the cap is enough to reject
        data = await resume.read(settings.max_upload_bytes + 1) if resume is not None else b""
        row = await run_in_threadpool(service.ingest, file_name, content_type, data)
        return CandidateOut.model_validate(row)

    @app.get("/api/resumes", response_model=List[CandidateOut])
    def list_resumes(service: CandidateService = Depends(get_service)):
        return [CandidateOut.model_validate(r) for r in service.list_all()]

    @app.get("/api/shortlisted", response_model=List[CandidateOut])
    def list_shortlisted(
        threshold: Optional[int] = Query(default=None, ge=0, le=100),
        service: CandidateService = Depends(get_service),
    ):
        return [CandidateOut.model_validate(r) for r in service.list_shortlisted(threshold)]

    @app.get("/api/resumes/{candidate_id}", response_model=CandidateOut)
    def get_resume(candidate_id: str, service: CandidateService = Depends(get_service)):
        return CandidateOut.model_validate(service.get(candidate_id))

    @app.delete("/api/resumes/{candidate_id}", response_model=DeleteOut)
    def delete_resume(candidate_id: str, service: CandidateService = Depends(get_service)):
        row = service.delete(candidate_id)
        return DeleteOut(deleted=True, id=row.id)

    @app.post("/api/score-resume", response_model=ScoreOut)
    def score_resume(body: ScoreRequest, service: CandidateService = Depends(get_service)):
        """Score a stored candidate against a job description (0-100)."""
        row, result = service.score(body.resume_id, body.job_description)
        return ScoreOut(
            id=row.id,
            candidate_name=row.candidate_name,
            match_score=result.score,
            justification=result.justification,
            source=result.source,
            role_applied=row.role_applied,
        )

    return app


app = create_app()


# For local dev convenience
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app:app", host="0.0.0.0", port=int(os.getenv("PORT", "8000")), reload=True)
