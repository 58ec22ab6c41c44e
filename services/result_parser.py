"""
Result parsers - turn raw completion text into validated results.
All defaulting and clamping of model output happens here.
"""

import json
import math
from typing import Any, List, Optional

# Local imports
from models import MatchAnalysisResult, ParseOutcome

MIN_SCORE = 0
MAX_SCORE = 100


def parse_match_analysis(raw: Optional[str]) -> ParseOutcome[MatchAnalysisResult]:
    """
    Reads a match analysis JSON object. Invalid JSON or a non-object payload
    is a failure; an empty response and missing or corrupt fields fall back
    to their defaults.
    """
    payload = _load_json(raw or "{}")
    if not payload.ok:
        return ParseOutcome.failure(payload.error)
    data = payload.value
    if not isinstance(data, dict):
        return ParseOutcome.failure(f"Expected a JSON object, got {type(data).__name__}")

    result = MatchAnalysisResult(
        match_score=clamp_score(data.get("matchScore")),
        missing_keywords=_string_list(data.get("missingKeywords")),
        strong_matches=_string_list(data.get("strongMatches")),
        suggestions=_string_list(data.get("suggestions")),
    )
    return ParseOutcome.success(result)


def parse_suggestions(raw: Optional[str]) -> ParseOutcome[List[str]]:
    """Reads {"suggestions": [...]}; a bare JSON array is accepted as well."""
    payload = _load_json(raw)
    if not payload.ok:
        return ParseOutcome.failure(payload.error)
    data = payload.value
    if isinstance(data, dict):
        data = data.get("suggestions")
    if not isinstance(data, list):
        return ParseOutcome.failure("No suggestions array in response")
    return ParseOutcome.success(_string_list(data))


def tailored_text(raw: Optional[str], original_resume: str) -> str:
    """Falls back to the original resume when the completion has no content."""
    if raw is None or not raw.strip():
        return original_resume
    return raw


def cover_letter_text(raw: Optional[str]) -> str:
    return raw or ""


def clamp_score(value: Any) -> int:
    """Coerces a model-reported score into [0, 100]; unusable values become 0."""
    if isinstance(value, bool) or value is None:
        return MIN_SCORE
    if isinstance(value, str):
        try:
            value = float(value.strip().rstrip("%"))
        except ValueError:
            return MIN_SCORE
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        return MIN_SCORE
    return max(MIN_SCORE, min(MAX_SCORE, int(round(value))))


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def _load_json(raw: Optional[str]) -> ParseOutcome[Any]:
    if raw is None or not raw.strip():
        return ParseOutcome.failure("Empty response")
    try:
        return ParseOutcome.success(json.loads(raw))
    except json.JSONDecodeError as e:
        return ParseOutcome.failure(f"Invalid JSON: {e}")


def _string_list(value: Any) -> List[str]:
    """Keeps the order of a list of strings; anything that is not a list becomes []."""
    if not isinstance(value, list):
        return []
    items = []
    for item in value:
        if item is None:
            continue
        text = item if isinstance(item, str) else str(item)
        text = text.strip()
        if text:
            items.append(text)
    return items
