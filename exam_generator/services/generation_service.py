# Orchestrates prompt building, the model call and response parsing for one generation request
# exam_generator/services/generation_service.py
from typing import Any, List

from exam_generator.models.question import GenerationRequest
from exam_generator.services import llm_client
from exam_generator.services.prompt_library import build_prompt
from exam_generator.services.question_validator import validate_questions
from exam_generator.services.response_parser import parse_questions
from exam_generator.utils.config import settings
from exam_generator.utils.errors import AuthenticationError, EmptyResponseError, QuestionValidationError
from exam_generator.utils.logger import logger


async def generate_questions(request: GenerationRequest) -> List[Any]:
    """
    Runs one full generation or single-question regeneration.

    For regeneration the caller keeps only the first returned record and
    splices it in at the original index.
    """
    if not settings.github_pat:
        raise AuthenticationError("Model provider credential is not configured")

    target = request.regeneration_target
    if target is not None:
        logger.info(
            f"Regenerating question {target.index} ({target.question_type.value}) "
            f"for subject '{request.subject}' in '{request.language.value}'"
        )
    else:
        logger.info(
            f"Generating {request.question_counts.total()} questions for subject '{request.subject}' "
            f"in '{request.language.value}': {request.question_counts.model_dump(by_alias=True)}"
        )

    prompt = build_prompt(request)
    logger.debug(f"--- PROMPT FOR LLM ---\n{prompt}\n----------------------")

    text = await llm_client.complete(prompt)
    if text is None or not text.strip():
        raise EmptyResponseError("Model provider returned no content")

    questions = parse_questions(text)

    if settings.strict_validation:
        try:
            validate_questions(questions, request)
        except QuestionValidationError as e:
            logger.warning(f"Rejected model output: {e}")
            raise

    logger.info(f"Model returned {len(questions)} question(s).")
    return questions
