# streamlit_app/form_state.py
import requests
import sys
import os
from typing import Any, Dict, List, Optional

# Add project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from exam_generator.models.enums import Difficulty, Language, QuestionType
from exam_generator.models.question import Question
from exam_generator.utils.config import settings
from exam_generator.utils.logger import logger
from exam_generator.utils.translations import t

GENERATE_PATH = "/api/generate"


class GenerationFailed(Exception):
    """The API answered with an error or could not be reached."""


class ExamForm:
    """
    Form inputs plus the generated questions for one browser session.

    Talks to the generation API over HTTP; validation failures are reported
    through ``error`` and never reach the API.
    """

    def __init__(self, api_base_url: Optional[str] = None, http: Optional[requests.Session] = None):
        self.api_base_url = (api_base_url or settings.api_base_url).rstrip("/")
        self.http = http or requests.Session()

        self.subject = ""
        self.topics_text = ""
        self.topics: List[str] = []
        self.difficulty = Difficulty.MEDIUM
        self.language = Language.EN
        self.question_counts: Dict[str, int] = {
            QuestionType.OPEN_ENDED.value: 2,
            QuestionType.MULTIPLE_CHOICE.value: 2,
            QuestionType.TRUE_FALSE.value: 2,
        }

        self.questions: List[Any] = []
        self.loading = False
        self.error = ""

    def set_topics_from_text(self, text: str):
        self.topics_text = text
        self.topics = [topic.strip() for topic in text.split(",") if topic.strip()]

    def total_requested(self) -> int:
        return sum(self.question_counts.values())

    def validate(self) -> Optional[str]:
        """Returns the translation key of the first failed check, or None."""
        if not self.subject.strip():
            return "subject_required"
        if not self.topics:
            return "topics_required"
        if self.total_requested() <= 0:
            return "questions_required"
        return None

    def to_payload(self) -> Dict[str, Any]:
        return {
            "subject": self.subject,
            "topics": list(self.topics),
            "difficulty": Difficulty(self.difficulty).value,
            "language": Language(self.language).value,
            "questionCounts": dict(self.question_counts),
        }

    def _post(self, payload: Dict[str, Any]) -> List[Any]:
        url = f"{self.api_base_url}{GENERATE_PATH}"
        try:
            response = self.http.post(url, json=payload, timeout=settings.api_timeout_seconds)
        except requests.RequestException as e:
            logger.error(f"Could not reach generation API at {url}: {e}")
            raise GenerationFailed(str(e)) from e

        if not response.ok:
            try:
                detail = response.json().get("error")
            except (ValueError, AttributeError):
                detail = response.text[:200]
            logger.error(f"Generation API returned {response.status_code}: {detail}")
            raise GenerationFailed(detail or f"HTTP {response.status_code}")

        try:
            questions = response.json()["questions"]
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Generation API returned an unexpected body: {e}")
            raise GenerationFailed("Unexpected response body") from e
        if not isinstance(questions, list):
            raise GenerationFailed("Unexpected response body")
        return questions

    def submit(self) -> bool:
        """Generates a fresh set of questions. Returns True when the list was replaced."""
        if self.loading:
            return False
        self.error = ""

        problem = self.validate()
        if problem:
            self.error = t(self.language, problem)
            return False

        self.loading = True
        try:
            self.questions = self._post(self.to_payload())
            return True
        except GenerationFailed:
            self.error = t(self.language, "error")
            return False
        finally:
            self.loading = False

    def regenerate_at(self, index: int) -> bool:
        """Replaces only the question at ``index`` with a newly generated one of the same type."""
        if self.loading:
            return False
        if not 0 <= index < len(self.questions):
            raise IndexError(f"No question at index {index}")
        self.error = ""

        current = Question.from_record(self.questions[index])
        payload = self.to_payload()
        payload["regenerateIndex"] = index
        payload["regenerateQuestionType"] = current.type

        self.loading = True
        try:
            returned = self._post(payload)
            if not returned:
                raise GenerationFailed("No question returned")
        except GenerationFailed:
            self.error = t(self.language, "error")
            return False
        finally:
            self.loading = False

        updated = list(self.questions)
        updated[index] = returned[0]
        self.questions = updated
        return True
