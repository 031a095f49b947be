# exam_generator/services/prompt_library.py
from langchain_core.prompts import PromptTemplate

from exam_generator.models.enums import Language, QuestionType
from exam_generator.models.question import GenerationRequest

_QUESTION_SHAPE = """{{
  "type": "open-ended" | "multiple-choice" | "true-false",
  "question": "the question text",
  "options": ["option1", "option2", "option3", "option4"] (only for multiple-choice),
  "answer": "the correct answer"
}}"""

PROMPT_LIBRARY = {
    "full": PromptTemplate.from_template(
        """Generate exam questions for the following specifications:
Subject: {subject}
Topics: {topics}
Difficulty: {difficulty}
Language: {language}

Please generate:
- {open_ended_count} open-ended questions
- {multiple_choice_count} multiple-choice questions (with 4 options each)
- {true_false_count} true/false questions

Format the response as a JSON array of objects with the following structure:
"""
        + _QUESTION_SHAPE
        + """

{language_directive}"""
    ),
    "regenerate": PromptTemplate.from_template(
        """Generate exactly one new exam question for the following specifications:
Subject: {subject}
Topics: {topics}
Difficulty: {difficulty}
Language: {language}

The question must be of type "{question_type}"{type_note}.

Format the response as a JSON array containing exactly one object with the following structure:
"""
        + _QUESTION_SHAPE
        + """

{language_directive}"""
    ),
}

_LANGUAGE_NAMES = {
    Language.EN: "English",
    Language.TR: "Turkish",
}

_TRUE_FALSE_RULES = {
    Language.EN: 'For true/false questions, use "True" or "False" as answers.',
    Language.TR: (
        'For true/false questions in Turkish, use "Doğru" for true answers and "Yanlış" for false answers. '
        'Never use "True" or "False" for Turkish questions.'
    ),
}

_TYPE_NOTES = {
    QuestionType.OPEN_ENDED: "",
    QuestionType.MULTIPLE_CHOICE: " with exactly 4 options",
    QuestionType.TRUE_FALSE: "",
}


def language_directive(language: Language) -> str:
    """The closing instruction pinning content language and true/false literals."""
    return (
        f"IMPORTANT: Make sure all questions and answers are in {_LANGUAGE_NAMES[language]}. "
        f"{_TRUE_FALSE_RULES[language]}"
    )


def build_prompt(request: GenerationRequest) -> str:
    """
    Builds the instruction sent to the model.

    A request with a regeneration target asks for exactly one question of the
    target type and ignores the per-type counts. The output depends only on
    the request, so identical requests give identical prompts.
    """
    common = {
        "subject": request.subject,
        "topics": ", ".join(request.topics),
        "difficulty": request.difficulty.value,
        "language": request.language.value,
        "language_directive": language_directive(request.language),
    }

    target = request.regeneration_target
    if target is not None:
        return PROMPT_LIBRARY["regenerate"].format(
            question_type=target.question_type.value,
            type_note=_TYPE_NOTES[target.question_type],
            **common,
        )

    counts = request.question_counts
    return PROMPT_LIBRARY["full"].format(
        open_ended_count=counts.open_ended,
        multiple_choice_count=counts.multiple_choice,
        true_false_count=counts.true_false,
        **common,
    )
