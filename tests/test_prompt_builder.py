import pytest

from config import TONE_INSTRUCTIONS
from models import Tone
from services.prompt_builder import (
    build_match_analysis_prompt,
    build_tailor_prompt,
    build_cover_letter_prompt,
    build_suggestions_prompt,
    greeting_line,
)

RESUME = "Jane Smith\nSenior Engineer, 5 years Python backend experience"
JOB = "Seeking Python developer with AWS skills"


def test_match_analysis_prompt_embeds_inputs_and_field_names():
    prompt = build_match_analysis_prompt(RESUME, JOB)
    assert RESUME in prompt
    assert JOB in prompt
    for field in ("matchScore", "missingKeywords", "strongMatches", "suggestions"):
        assert field in prompt
    assert "JSON" in prompt


def test_prompts_are_deterministic():
    assert build_match_analysis_prompt(RESUME, JOB) == build_match_analysis_prompt(RESUME, JOB)
    assert build_tailor_prompt(RESUME, JOB, "Tech") == build_tailor_prompt(RESUME, JOB, "Tech")


def test_long_inputs_are_not_truncated():
    long_resume = "experience " * 20000
    prompt = build_tailor_prompt(long_resume, JOB, "Tech")
    assert long_resume in prompt


def test_braces_in_inputs_survive_rendering():
    resume = 'Built {"json": "apis"} and {templates}'
    assert resume in build_suggestions_prompt(resume, "Tech")


def test_tailor_prompt_forbids_fabrication_and_uses_field():
    prompt = build_tailor_prompt(RESUME, JOB, "Healthcare")
    assert "specializing in Healthcare" in prompt
    assert "Healthcare-specific terminology" in prompt
    assert "Never fabricate experience" in prompt
    assert "original structure" in prompt


@pytest.mark.parametrize(
    "hiring_manager, expected",
    [
        (None, "Dear Hiring Manager,"),
        ("", "Dear Hiring Manager,"),
        ("   ", "Dear Hiring Manager,"),
        ("Jane Doe", "Dear Jane Doe,"),
    ],
)
def test_greeting_line(hiring_manager, expected):
    assert greeting_line(hiring_manager) == expected
    prompt = build_cover_letter_prompt(RESUME, JOB, "Acme", Tone.PROFESSIONAL, hiring_manager)
    assert f'Start with "{expected}"' in prompt


@pytest.mark.parametrize("tone", list(Tone))
def test_cover_letter_prompt_contains_only_its_tone_phrase(tone):
    prompt = build_cover_letter_prompt(RESUME, JOB, "Acme", tone)
    assert TONE_INSTRUCTIONS[tone.value] in prompt
    for other, phrase in TONE_INSTRUCTIONS.items():
        if other != tone.value:
            assert phrase not in prompt


def test_cover_letter_prompt_caps_length_and_names_company():
    prompt = build_cover_letter_prompt(RESUME, JOB, "Acme Corp", Tone.FORMAL)
    assert "Company: Acme Corp" in prompt
    assert "under 400 words" in prompt


def test_suggestions_prompt_requests_json_array():
    prompt = build_suggestions_prompt(RESUME, "Marketing")
    assert "3-5" in prompt
    assert '{"suggestions": ["...", "..."]}' in prompt
    assert "Marketing resume" in prompt
