"""
Interview Questions Service Module

This module orchestrates one generation request: render the prompt, wait for
the provider's completion, parse it into question/answer records and persist
the batch. The completion call and the write run one after the other; the write
never starts before the completion resolves.

Failures are raised, not returned:
- ProviderUnavailable / ProviderThrottled / ProviderError from the completion client
- ParseEmpty when no usable record could be parsed (nothing is persisted)
- PersistenceError when the write fails, even though records were parsed

Dependencies:
- loguru: For logging operations.
- app.core.prompt_templates: For building the prompt.
- app.helper.parse_qa_pairs: For parsing the completion.
- app.services.completion: For the CompletionClient interface.
- app.database: For the RecordStore.
"""

from typing import List
from loguru import logger
from app.core.prompt_templates import build_interview_prompt
from app.database import RecordStore
from app.errors.exceptions import ParseEmpty
from app.helper.parse_qa_pairs import parse_qa_pairs
from app.schemas.interview_questions import InterviewBatch, InterviewRequest, QARecord
from app.services.completion import CompletionClient


class InterviewQuestionsService:
    """
    Generates, parses and stores interview question/answer pairs.

    Attributes:
        completion_client (CompletionClient): The configured provider adapter.
        record_store (RecordStore): Storage for generated batches.
    """

    def __init__(self, completion_client: CompletionClient, record_store: RecordStore):
        self.completion_client = completion_client
        self.record_store = record_store

    async def generate_questions(self, request: InterviewRequest) -> List[QARecord]:
        """
        Run the full generation pipeline for one request.

        Args:
            request (InterviewRequest): Job-role parameters from the caller.

        Returns:
            List[QARecord]: Parsed records, in the order the model produced them.
        """
        prompt = build_interview_prompt(request)
        logger.debug(f"Built prompt for jobType={request.jobType!r}")

        text = await self.completion_client.complete(prompt)
        logger.debug(f"{self.completion_client.provider} response:\n{text}")

        questions = parse_qa_pairs(text)
        if not questions:
            logger.error("Failed to parse questions properly.")
            raise ParseEmpty()

        batch = InterviewBatch(
            **request.model_dump(),
            questions=questions,
            provider=self.completion_client.provider,
            model=self.completion_client.model,
        )
        await self.record_store.save_batch(batch)
        return questions
