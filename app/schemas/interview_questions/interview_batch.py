"""
Description:
Schema for the persisted aggregate of one successful generation: the request
fields plus the parsed question/answer records.

Dependencies:
- pydantic: For data validation and settings management.
- datetime: For the creation timestamp.
"""
from datetime import datetime, timezone
from typing import List, Optional
from pydantic import Field
from app.schemas.interview_questions.interview_request import InterviewRequest
from app.schemas.interview_questions.qa_record import QARecord

class InterviewBatch(InterviewRequest):
    questions: List[QARecord]
    provider: Optional[str] = None
    model: Optional[str] = None
    createdAt: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_document(self) -> dict:
        """Return the MongoDB document for this batch."""
        return self.model_dump()
