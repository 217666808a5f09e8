"""
Interview Questions API Route

Description:
This module defines the FastAPI routes that generate interview question/answer
pairs for a job role. POST /api/interview-questions and POST /generate-qa share
one handler and one contract.

Arguments:
- payload: An InterviewRequest with jobType, workExperience, companyType and location.
  Fields may be missing; a missing body is treated as all fields missing.

Returns:
- 200 {"questions": [{"question": ..., "answer": ...}, ...]} on success.
- 503 {"error": ..., "retryAfter": ...} when the provider is throttling.
- 502 {"error": ...} when the provider cannot be reached.
- 500 {"error": ...} for provider, parse, persistence and unexpected failures.

Dependencies:
- fastapi: For creating routes and dependency injection.
- app.core.dependencies: For the generation service.
- loguru: For logging information about the request and any errors that occur.
"""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from app.core.dependencies import get_interview_questions_service
from app.errors.exceptions import (
    GenerationFailed,
    InternalServerError,
    PersistenceError,
    ProviderError,
    ProviderQuotaExceeded,
    ProviderThrottled,
    ProviderUnavailable,
    ProviderUnreachable,
    SaveFailed,
)
from app.schemas.interview_questions import ErrorResponse, InterviewRequest, QuestionsResponse
from app.services.interview_questions_service import InterviewQuestionsService

router = APIRouter(
    tags=["interview-questions"],
    responses={
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    }
)


@router.post("/api/interview-questions", response_model=QuestionsResponse)
@router.post("/generate-qa", response_model=QuestionsResponse)
async def generate_interview_questions(
    payload: Optional[InterviewRequest] = None,
    service: InterviewQuestionsService = Depends(get_interview_questions_service),
):
    """
    Generate, store and return interview questions for a job role
    """
    payload = payload or InterviewRequest()
    try:
        questions = await service.generate_questions(payload)
        return QuestionsResponse(questions=questions)
    except HTTPException:
        raise
    except ProviderThrottled as e:
        logger.warning(f"Provider throttled request: {e}")
        raise ProviderQuotaExceeded(retry_after=e.retry_after) from e
    except ProviderUnavailable as e:
        logger.error(f"Provider unavailable: {e}")
        raise ProviderUnreachable() from e
    except ProviderError as e:
        logger.error(f"Provider error: {e}")
        raise GenerationFailed() from e
    except PersistenceError as e:
        logger.error(f"Generated questions could not be saved: {e}")
        raise SaveFailed() from e
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        raise InternalServerError("Internal server error") from e
