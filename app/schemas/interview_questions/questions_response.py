"""
Description:
Response schemas for the question generation endpoint.

Dependencies:
- pydantic: For data validation and settings management.
"""
from typing import List, Optional
from pydantic import BaseModel
from app.schemas.interview_questions.qa_record import QARecord

class QuestionsResponse(BaseModel):
    questions: List[QARecord]

class ErrorResponse(BaseModel):
    error: str
    retryAfter: Optional[str] = None
