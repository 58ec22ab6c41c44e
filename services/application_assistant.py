"""
Application assistant - the match analysis, tailoring, cover letter and
suggestion workflows. Each call validates its inputs, renders one prompt,
makes one completion request and parses the result.
"""

from typing import List, Optional

# Local imports
from config import CONFIG
from models import MatchAnalysisResult, Tone
from services.completion_client import CompletionClient
from services.exceptions import InvalidInput, ParseFailed
from services.prompt_builder import (
    build_match_analysis_prompt,
    build_tailor_prompt,
    build_cover_letter_prompt,
    build_suggestions_prompt,
)
from services.result_parser import parse_match_analysis, parse_suggestions, tailored_text, cover_letter_text


class ApplicationAssistant:
    """Stateless workflows over an injected completion client."""

    def __init__(self, completion_client: CompletionClient, max_input_chars: int = CONFIG["max_input_chars"], default_field: str = CONFIG["default_field"]):
        self.completion_client = completion_client
        self.max_input_chars = max_input_chars
        self.default_field = default_field

    async def analyze_match(self, resume_text: str, job_text: str) -> MatchAnalysisResult:
        """
        Scores a resume against a job description.

        Raises:
            InvalidInput: Resume or job text is missing, empty or too long
            CompletionFailed: The provider call failed
            ParseFailed: The provider returned something other than a JSON object
        """
        self._require(resume_text=resume_text, job_text=job_text)

        print("🤖 Running ATS match analysis...")
        prompt = build_match_analysis_prompt(resume_text, job_text)
        raw = await self.completion_client.complete(prompt, json_mode=True)

        outcome = parse_match_analysis(raw)
        if not outcome.ok:
            print(f"❌ Could not parse match analysis: {outcome.error}")
            raise ParseFailed(outcome.error)

        print(f"✅ Match analysis complete. Score: {outcome.value.match_score}")
        return outcome.value

    async def tailor_resume(self, resume_text: str, job_text: str, field: Optional[str] = None) -> str:
        """
        Rewrites the resume for the job. Returns the original resume unchanged
        when the provider produces no content.
        """
        self._require(resume_text=resume_text, job_text=job_text)
        field = self._field_or_default(field)

        print(f"🤖 Tailoring resume for field '{field}'...")
        prompt = build_tailor_prompt(resume_text, job_text, field)
        raw = await self.completion_client.complete(prompt)

        print("✅ Resume tailoring complete.")
        return tailored_text(raw, resume_text)

    async def generate_cover_letter(
        self,
        resume_text: str,
        job_text: str,
        company_name: str,
        tone: Optional[str] = None,
        hiring_manager: Optional[str] = None,
    ) -> str:
        """Writes a cover letter. Unknown or missing tones use the professional tone."""
        self._require(resume_text=resume_text, job_text=job_text, company_name=company_name)
        tone = Tone.coerce(tone)

        print(f"🤖 Generating {tone.value} cover letter for {company_name}...")
        prompt = build_cover_letter_prompt(resume_text, job_text, company_name, tone, hiring_manager)
        raw = await self.completion_client.complete(prompt)

        print("✅ Cover letter generated.")
        return cover_letter_text(raw)

    async def generate_suggestions(self, resume_text: str, field: Optional[str] = None) -> List[str]:
        """
        Best-effort improvement suggestions for a resume. Never raises:
        any failure is reported and an empty list is returned.
        """
        try:
            self._require(resume_text=resume_text)
            field = self._field_or_default(field)

            print(f"🤖 Generating resume suggestions for field '{field}'...")
            prompt = build_suggestions_prompt(resume_text, field)
            raw = await self.completion_client.complete(prompt, json_mode=True)
        except Exception as e:
            print(f"⚠️ Skipping resume suggestions: {str(e)}")
            return []

        outcome = parse_suggestions(raw)
        if not outcome.ok:
            print(f"⚠️ Could not parse resume suggestions: {outcome.error}")
            return []

        print(f"✅ Generated {len(outcome.value)} suggestions.")
        return outcome.value

    # ============================================================================
    # INPUT VALIDATION
    # ============================================================================

    def _require(self, **fields: Optional[str]) -> None:
        for name, value in fields.items():
            if not isinstance(value, str) or not value.strip():
                raise InvalidInput(f"{name} is required")
            if len(value) > self.max_input_chars:
                raise InvalidInput(f"{name} exceeds the maximum length of {self.max_input_chars} characters")

    def _field_or_default(self, field: Optional[str]) -> str:
        if not isinstance(field, str) or not field.strip():
            return self.default_field
        return field.strip()
