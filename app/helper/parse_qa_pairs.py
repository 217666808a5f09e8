"""
Description:
Parse a free-text LLM completion into question/answer records.

The completion is expected to follow the format requested by the prompt:

    1. <question>
    Answer: <answer, possibly over several lines>
    2. <question>
    Answer: ...

Blocks that do not carry both a question line and an "Answer:" marker are
dropped. No partial records are emitted and the record count is not forced to
match the number of questions requested.

Arguments:
- text: The raw completion text.

Returns:
- A list of QARecord in document order.

Dependencies:
- app.constants.regex_patterns: For the precompiled block, question and answer patterns.
- app.schemas.interview_questions: For the QARecord schema.
- loguru: For logging discarded blocks.
"""
from typing import List, Optional
from loguru import logger
from app.constants.regex_patterns import QA_PATTERNS
from app.schemas.interview_questions import QARecord

def parse_qa_block(block: str) -> Optional[QARecord]:
    """Return the record held in one numbered block, or None if the block is incomplete."""
    question_match = QA_PATTERNS['question'].search(block)
    answer_match = QA_PATTERNS['answer'].search(block)
    if not question_match or not answer_match:
        return None

    question = question_match.group(1).strip()
    answer = answer_match.group(1).strip()
    if not question or not answer:
        return None
    return QARecord(question=question, answer=answer)

def parse_qa_pairs(text: Optional[str]) -> List[QARecord]:
    if not text:
        return []

    records = []
    blocks = QA_PATTERNS['block_boundary'].split(text)
    for index, block in enumerate(blocks):
        record = parse_qa_block(block)
        if record is None:
            logger.debug(f"Discarding block {index}: no question/answer pair found")
            continue
        records.append(record)

    logger.info(f"Parsed {len(records)} question/answer pairs from {len(blocks)} blocks")
    return records
