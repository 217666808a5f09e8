"""
Description:
Schema for a single generated interview question and its answer.

Dependencies:
- pydantic: For data validation and settings management.
"""
from pydantic import BaseModel, ConfigDict, Field

class QARecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    question: str = Field(min_length=1, description="Question text, trimmed")
    answer: str = Field(min_length=1, description="Answer text, trimmed, may span several lines")
