"""
Test Prompt Templates Module

Dependencies:
- pytest: For testing framework
- app.core.prompt_templates: The module being tested
"""

from app.core.prompt_templates import build_interview_prompt, PromptTemplate, SYSTEM_PROMPT
from app.schemas.interview_questions import InterviewRequest


def test_prompt_interpolates_all_fields():
    """Test that all four request fields appear in the prompt."""
    prompt = build_interview_prompt(InterviewRequest(
        jobType="Data Engineer",
        workExperience="5",
        companyType="Fintech",
        location="Toronto",
    ))
    assert "exactly 10 diverse interview questions with answers for a Data Engineer role" in prompt
    assert "- Work Experience: 5 years" in prompt
    assert "- Preferred Location: Toronto" in prompt
    assert "- Target Company Type: Fintech" in prompt


def test_prompt_requests_question_mix_and_format():
    """Test that the prompt asks for the 4/3/3 mix in the numbered format."""
    prompt = build_interview_prompt(InterviewRequest(jobType="QA Analyst"))
    assert "- 4 Technical questions" in prompt
    assert "- 3 Behavioral questions" in prompt
    assert "- 3 Situational questions" in prompt
    assert "Format strictly as:\n1. Question\nAnswer: Full answer here." in prompt


def test_missing_fields_render_empty():
    """Test that missing fields render as empty text, not "None"."""
    prompt = build_interview_prompt(InterviewRequest())
    assert "for a  role" in prompt
    assert "- Work Experience:  years" in prompt
    assert "None" not in prompt


def test_fields_are_not_escaped():
    """Test that field values are interpolated verbatim."""
    prompt = build_interview_prompt(InterviewRequest(jobType="<b>{lead}</b> & co"))
    assert "for a <b>{lead}</b> & co role" in prompt


def test_prompt_is_deterministic():
    """Test that the same request always renders the same prompt."""
    request = InterviewRequest(jobType="SRE", workExperience="2", companyType="MNC", location="Remote")
    assert build_interview_prompt(request) == build_interview_prompt(request)


def test_prompt_template_render():
    """Test that PromptTemplate renders None placeholders as empty text."""
    template = PromptTemplate(template="Hello {name}, {missing}!")
    assert template.render(name="Ada", missing=None) == "Hello Ada, !"


def test_system_prompt():
    """Test the fixed system prompt text."""
    assert SYSTEM_PROMPT == "You are an expert interview question generator."
