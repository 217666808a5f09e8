"""
Prompt Templates Module

This module holds the prompt used to generate interview question/answer pairs.
The output format requested here is the one app.helper.parse_qa_pairs expects,
so the two must change together.

Request fields are interpolated verbatim. Missing fields render as empty text.

Dependencies:
- dataclasses: For the template data structure
- app.schemas.interview_questions: For the InterviewRequest schema
"""

from dataclasses import dataclass
from typing import Dict
from app.schemas.interview_questions import InterviewRequest

SYSTEM_PROMPT = "You are an expert interview question generator."

QUESTION_COUNT = 10
QUESTION_MIX: Dict[str, int] = {
    "Technical": 4,
    "Behavioral": 3,
    "Situational": 3,
}


@dataclass(frozen=True)
class PromptTemplate:
    """Prompt template with named str.format placeholders."""
    template: str

    def render(self, **kwargs) -> str:
        values = {key: "" if value is None else str(value) for key, value in kwargs.items()}
        return self.template.format(**values)


INTERVIEW_QUESTIONS_TEMPLATE = PromptTemplate(
    template=(
        "\n"
        "Generate exactly {count} diverse interview questions with answers for a {jobType} role.\n"
        "\n"
        "Context:\n"
        "- Work Experience: {workExperience} years\n"
        "- Preferred Location: {location}\n"
        "- Target Company Type: {companyType}\n"
        "\n"
        "Include:\n"
        "{mix}\n"
        "\n"
        "Format strictly as:\n"
        "1. Question\n"
        "Answer: Full answer here.\n"
    )
)


def build_interview_prompt(request: InterviewRequest) -> str:
    """
    Render the user prompt for one generation request.

    Args:
        request (InterviewRequest): Job-role parameters from the request body.

    Returns:
        str: Prompt asking for QUESTION_COUNT numbered question/answer pairs.

    Example:
        >>> prompt = build_interview_prompt(InterviewRequest(jobType="Backend Engineer"))
        >>> "for a Backend Engineer role" in prompt
        True
    """
    mix = "\n".join(f"- {count} {kind} questions" for kind, count in QUESTION_MIX.items())
    return INTERVIEW_QUESTIONS_TEMPLATE.render(
        count=QUESTION_COUNT,
        jobType=request.jobType,
        workExperience=request.workExperience,
        location=request.location,
        companyType=request.companyType,
        mix=mix,
    )
