"""
Description:
This module contains precompiled regex patterns for splitting an LLM completion
into numbered question/answer blocks.

Dependencies:
- re: Python's built-in regular expression module for pattern matching.
"""

import re

# Compile regex patterns once for better performance
QA_PATTERNS = {
    # A newline followed by "<n>." and whitespace starts a new block; the marker stays with that block
    'block_boundary': re.compile(r"\n(?=\d+\.\s)"),
    'question': re.compile(r"\d+\.\s*(.+?)\n"),
    # First "Answer:" wins, anything after it (later markers included) is the answer
    'answer': re.compile(r"Answer:\s*(.*)", re.DOTALL),
}
