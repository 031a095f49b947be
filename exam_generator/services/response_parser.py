# exam_generator/services/response_parser.py
import json
import re
from typing import Any, List, Optional

from exam_generator.utils.errors import ParseError
from exam_generator.utils.logger import logger

_LEADING_FENCE = re.compile(r"^```(?:json)?", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"```$")

# How much of an unparseable completion ends up in the log.
_LOG_PREVIEW_CHARS = 500


def strip_code_fences(text: str) -> str:
    """Removes a leading ``` / ```json marker and a trailing ``` marker."""
    cleaned = text.strip()
    cleaned = _LEADING_FENCE.sub("", cleaned, count=1)
    cleaned = _TRAILING_FENCE.sub("", cleaned.rstrip(), count=1)
    return cleaned.strip()


def parse_questions(raw_text: Optional[str]) -> List[Any]:
    """
    Deserializes a completion into the list of question records it holds.

    Only syntax is checked: the cleaned text must be a JSON array. The records
    themselves are returned untouched.
    """
    if not raw_text or not raw_text.strip():
        raise ParseError(raw_text, "Model response is empty")

    cleaned = strip_code_fences(raw_text)
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.warning(f"Could not parse model response as JSON ({e.msg}): {raw_text[:_LOG_PREVIEW_CHARS]!r}")
        raise ParseError(raw_text, f"Model response is not valid JSON: {e.msg}") from e

    if not isinstance(parsed, list):
        logger.warning(f"Model response is JSON but not an array ({type(parsed).__name__}): {raw_text[:_LOG_PREVIEW_CHARS]!r}")
        raise ParseError(raw_text, "Model response is not a JSON array")

    return parsed
