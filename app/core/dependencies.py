"""
Description:
FastAPI dependencies exposing the process-wide clients created during startup.

The lifespan handler in app.main stores the completion client and record store
on app.state; route handlers receive them through these functions, and tests
replace them with app.dependency_overrides.

Dependencies:
- fastapi: For Request and Depends.
"""
from fastapi import Depends, Request
from app.database import RecordStore
from app.services.completion import CompletionClient
from app.services.interview_questions_service import InterviewQuestionsService

def get_completion_client(request: Request) -> CompletionClient:
    return request.app.state.completion_client

def get_record_store(request: Request) -> RecordStore:
    return request.app.state.record_store

def get_interview_questions_service(
    completion_client: CompletionClient = Depends(get_completion_client),
    record_store: RecordStore = Depends(get_record_store),
) -> InterviewQuestionsService:
    return InterviewQuestionsService(completion_client, record_store)
