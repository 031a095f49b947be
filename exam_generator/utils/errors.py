"""
Error taxonomy for question generation.

Every error carries a ``user_message`` that is safe to return to the browser.
None of them ever embed the provider credential.
"""
from typing import List, Optional


class ExamGenerationError(Exception):
    """Base exception for generation failures"""
    user_message = "Failed to generate questions"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.user_message)


class AuthenticationError(ExamGenerationError):
    """Raised when the provider credential is missing or rejected"""
    user_message = "The question service is not authorized to reach the model provider. Check the server credential."


class UpstreamError(ExamGenerationError):
    """Raised when the provider call fails for any other reason"""
    user_message = "Failed to generate questions"


class UpstreamTimeoutError(UpstreamError):
    """Raised when the provider call times out"""
    user_message = "The model provider took too long to respond. Please try again."


class UpstreamRateLimitError(UpstreamError):
    """Raised when the provider rejects the call with a rate limit"""
    user_message = "The model provider is rate limiting requests. Please wait a moment and try again."


class EmptyResponseError(ExamGenerationError):
    """Raised when the provider answered without any content"""
    user_message = "The model returned an empty response. Please try again."


class ParseError(ExamGenerationError):
    """Raised when the completion is not a JSON array of questions"""
    user_message = "The model response could not be read as a list of questions. Please try again."

    def __init__(self, raw_text: Optional[str], message: Optional[str] = None):
        super().__init__(message)
        self.raw_text = raw_text


class QuestionValidationError(ExamGenerationError):
    """Raised in strict mode when the returned questions do not match the request"""
    user_message = "The model returned questions that do not match the request. Please try again."

    def __init__(self, problems: List[str]):
        super().__init__("; ".join(problems))
        self.problems = problems
