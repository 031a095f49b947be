# Builds the downloadable question sheet and answer key as .docx files
# exam_generator/services/exporter.py
from io import BytesIO
from typing import Any, Iterable, List

from docx import Document
from docx.shared import Pt

from exam_generator.models.enums import Language, QuestionType
from exam_generator.models.question import Question
from exam_generator.utils.translations import t

HEADING_SIZE = Pt(14)
QUESTION_SIZE = Pt(12)
OPTION_SIZE = Pt(11)
SPACER_SIZE = Pt(6)


def option_label(index: int) -> str:
    """0 -> 'A', 25 -> 'Z', 26 -> 'AA', like spreadsheet columns."""
    label = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        label = chr(ord("A") + remainder) + label
    return label


def _to_questions(questions: Iterable[Any]) -> List[Question]:
    return [q if isinstance(q, Question) else Question.from_record(q) for q in questions]


def _add_paragraph(doc, runs, space_after):
    """Adds a paragraph made of (text, size, bold) runs."""
    p = doc.add_paragraph()
    p.paragraph_format.space_after = space_after
    for text, size, bold in runs:
        r = p.add_run(text)
        r.font.size = size
        r.bold = bold
    return p


def _to_bytes(doc) -> bytes:
    buffer = BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


def build_questions_document(subject: str, questions: Iterable[Any], language: Language | str = Language.EN) -> bytes:
    """Question sheet: subject heading, numbered questions, lettered choices. No answers."""
    doc = Document()
    _add_paragraph(doc, [(f"{t(language, 'subject_label')}: {subject}", HEADING_SIZE, True)], Pt(20))

    for number, q in enumerate(_to_questions(questions), start=1):
        _add_paragraph(doc, [(f"{number}. ", QUESTION_SIZE, True), (q.question, QUESTION_SIZE, False)], Pt(10))

        if q.type == QuestionType.MULTIPLE_CHOICE.value and q.options:
            for i, option in enumerate(q.options):
                _add_paragraph(doc, [(f"{option_label(i)}. {option}", OPTION_SIZE, False)], Pt(5))

        if q.type == QuestionType.TRUE_FALSE.value:
            _add_paragraph(doc, [(f"A. {t(language, 'true')}", OPTION_SIZE, False)], Pt(5))
            _add_paragraph(doc, [(f"B. {t(language, 'false')}", OPTION_SIZE, False)], Pt(5))

        _add_paragraph(doc, [("", SPACER_SIZE, False)], Pt(15))

    return _to_bytes(doc)


def build_answer_key_document(questions: Iterable[Any], language: Language | str = Language.EN) -> bytes:
    """Answer key: one numbered answer per question, in display order."""
    doc = Document()
    _add_paragraph(doc, [(f"{t(language, 'answer_key')}:", HEADING_SIZE, True)], Pt(20))

    for number, q in enumerate(_to_questions(questions), start=1):
        _add_paragraph(doc, [(f"{number}. ", QUESTION_SIZE, True), (q.answer, QUESTION_SIZE, False)], Pt(10))

    return _to_bytes(doc)


def questions_file_name(subject: str, language: Language | str = Language.EN) -> str:
    return f"{subject}-{t(language, 'questions_file_name')}.docx"


def answer_key_file_name(subject: str, language: Language | str = Language.EN) -> str:
    return f"{subject}-{t(language, 'answer_key_file_name')}.docx"
