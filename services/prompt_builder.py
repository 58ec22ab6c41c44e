"""
Prompt builders - render the task prompts sent to the completion client.
Inputs are embedded verbatim; length limits are enforced by the caller.
"""

from typing import Optional

# Local imports
from models import Tone
from config import (
    MATCH_ANALYSIS_PROMPT,
    TAILOR_PROMPT,
    COVER_LETTER_PROMPT,
    COVER_LETTER_MAX_WORDS,
    SUGGESTIONS_PROMPT,
    TONE_INSTRUCTIONS,
)


def build_match_analysis_prompt(resume_text: str, job_text: str) -> str:
    return MATCH_ANALYSIS_PROMPT.format(resume_text=resume_text, job_text=job_text)


def build_tailor_prompt(resume_text: str, job_text: str, field: str) -> str:
    return TAILOR_PROMPT.format(resume_text=resume_text, job_text=job_text, field=field)


def build_cover_letter_prompt(resume_text: str, job_text: str, company_name: str, tone: Tone, hiring_manager: Optional[str] = None) -> str:
    """
    Renders the cover letter prompt. The greeting names the hiring manager
    when one is given, otherwise it addresses the hiring manager generically.
    """
    return COVER_LETTER_PROMPT.format(
        resume_text=resume_text,
        job_text=job_text,
        company_name=company_name,
        tone_instruction=TONE_INSTRUCTIONS[Tone.coerce(tone).value],
        greeting=greeting_line(hiring_manager),
        max_words=COVER_LETTER_MAX_WORDS,
    )


def build_suggestions_prompt(resume_text: str, field: str) -> str:
    return SUGGESTIONS_PROMPT.format(resume_text=resume_text, field=field)


def greeting_line(hiring_manager: Optional[str] = None) -> str:
    name = str(hiring_manager or "").strip()
    return f"Dear {name}," if name else "Dear Hiring Manager,"
