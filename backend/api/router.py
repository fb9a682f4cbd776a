import logging

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_current_year, get_match_orchestrator
from config import settings
from models.requests import ChatRequest, MatchTextRequest
from models.responses import ChatResponse, MatchResult
from services import chat_assistant
from services.exceptions import InvalidInputError
from services.pipeline.orchestrator import MatchOrchestrator
from services.text_loader import decode_text_upload

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
    }


async def _read_upload(upload: UploadFile, label: str) -> str:
    content = await upload.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"{label} file too large. Max size: {settings.max_upload_size_mb}MB",
        )
    try:
        return decode_text_upload(upload.filename, content, label=label)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _run_analysis(
    orchestrator: MatchOrchestrator,
    resume_text: str,
    job_description: str,
    current_year: int,
) -> MatchResult:
    if len(resume_text) > settings.max_resume_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Resume too long (max {settings.max_resume_chars} chars)",
        )
    if len(job_description) > settings.max_job_description_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_job_description_chars} chars)",
        )

    try:
        return orchestrator.analyze(resume_text, job_description, current_year)
    except InvalidInputError as e:
        logger.info("Rejected match request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/api/match", response_model=MatchResult)
@limiter.limit("10/minute")
async def match(
    request: Request,
    resume: UploadFile = File(...),
    job_desc: UploadFile = File(..., alias="jobDesc"),
    orchestrator: MatchOrchestrator = Depends(get_match_orchestrator),
    current_year: int = Depends(get_current_year),
):
    resume_text = await _read_upload(resume, "Resume")
    job_description = await _read_upload(job_desc, "Job description")
    return _run_analysis(orchestrator, resume_text, job_description, current_year)


@router.post("/api/match/text", response_model=MatchResult)
@limiter.limit("10/minute")
async def match_text(
    request: Request,
    body: MatchTextRequest,
    orchestrator: MatchOrchestrator = Depends(get_match_orchestrator),
    current_year: int = Depends(get_current_year),
):
    return _run_analysis(orchestrator, body.resume_text, body.job_description, current_year)


@router.post("/api/chat", response_model=ChatResponse)
@limiter.limit("10/minute")
async def chat(request: Request, body: ChatRequest):
    return await chat_assistant.answer_question(body.message, body.match_result)
