# Optional strict check that the model returned what was asked for
# exam_generator/services/question_validator.py
from collections import Counter
from typing import Any, List

from exam_generator.models.enums import QuestionType
from exam_generator.models.question import GenerationRequest
from exam_generator.utils.errors import QuestionValidationError
from exam_generator.utils.translations import TRUE_FALSE_LITERALS

MULTIPLE_CHOICE_OPTION_COUNT = 4


def _record_problems(position: int, record: Any, request: GenerationRequest) -> List[str]:
    label = f"question {position}"
    if not isinstance(record, dict):
        return [f"{label} is not an object"]

    problems = []
    try:
        question_type = QuestionType(record.get("type"))
    except ValueError:
        return [f"{label} has unknown type {record.get('type')!r}"]

    for field in ("question", "answer"):
        value = record.get(field)
        if not isinstance(value, str) or not value.strip():
            problems.append(f"{label} is missing '{field}'")

    if question_type == QuestionType.MULTIPLE_CHOICE:
        options = record.get("options")
        if not isinstance(options, list) or len(options) != MULTIPLE_CHOICE_OPTION_COUNT:
            problems.append(f"{label} must have exactly {MULTIPLE_CHOICE_OPTION_COUNT} options")

    if question_type == QuestionType.TRUE_FALSE:
        allowed = TRUE_FALSE_LITERALS[request.language]
        if record.get("answer") not in allowed:
            problems.append(f"{label} answer must be one of {allowed}")

    return problems


def validate_questions(records: List[Any], request: GenerationRequest) -> None:
    """Raises QuestionValidationError listing every mismatch between records and request."""
    problems = []
    for position, record in enumerate(records, start=1):
        problems.extend(_record_problems(position, record, request))

    target = request.regeneration_target
    if target is not None:
        expected = Counter({target.question_type.value: 1})
    else:
        expected = Counter({qt.value: request.question_counts.for_type(qt) for qt in QuestionType})
    expected_total = sum(expected.values())

    if len(records) != expected_total:
        problems.append(f"expected {expected_total} questions, got {len(records)}")
    else:
        actual = Counter(
            record.get("type") for record in records
            if isinstance(record, dict) and isinstance(record.get("type"), str)
        )
        for question_type in QuestionType:
            want = expected[question_type.value]
            got = actual[question_type.value]
            if want != got:
                problems.append(f"expected {want} {question_type.value} questions, got {got}")

    if problems:
        raise QuestionValidationError(problems)
