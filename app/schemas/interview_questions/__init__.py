from .interview_request import InterviewRequest
from .qa_record import QARecord
from .interview_batch import InterviewBatch
from .questions_response import QuestionsResponse, ErrorResponse

__all__ = [
    "InterviewRequest",
    "QARecord",
    "InterviewBatch",
    "QuestionsResponse",
    "ErrorResponse"
]
