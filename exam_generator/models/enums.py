# exam_generator/models/enums.py
from enum import Enum

class QuestionType(str, Enum):
    """The kinds of question the model is asked to write."""
    OPEN_ENDED = "open-ended"
    MULTIPLE_CHOICE = "multiple-choice"
    TRUE_FALSE = "true-false"

class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

class Language(str, Enum):
    """Languages the exam content can be generated in."""
    EN = "en"
    TR = "tr"
