# Thin wrapper around the OpenAI-compatible chat completion endpoint used for question generation
# exam_generator/services/llm_client.py
import threading

import openai
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from exam_generator.utils.config import settings
from exam_generator.utils.errors import (
    AuthenticationError,
    UpstreamError,
    UpstreamRateLimitError,
    UpstreamTimeoutError,
)
from exam_generator.utils.logger import logger

# --- Lazily initialized client ---
_llm_client = None
_init_lock = threading.Lock()


def _get_llm_client() -> ChatOpenAI:
    """Builds the chat client on first use. Fails closed when no credential is configured."""
    global _llm_client

    if not settings.github_pat:
        logger.error("GITHUB_PAT is not configured; refusing to call the model provider.")
        raise AuthenticationError("Model provider credential is not configured")

    with _init_lock:
        if _llm_client is None:
            logger.info(f"Initializing chat client for model '{settings.model_name}' at {settings.model_endpoint}")
            _llm_client = ChatOpenAI(
                api_key=settings.github_pat,
                base_url=settings.model_endpoint,
                model=settings.model_name,
                temperature=settings.temperature,
                top_p=settings.top_p,
                max_tokens=settings.max_tokens,
                timeout=settings.request_timeout_seconds,
                max_retries=0,  # exactly one attempt
            )
        return _llm_client


def reset_llm_client():
    """Drops the cached client so the next call picks up current settings."""
    global _llm_client
    with _init_lock:
        _llm_client = None


async def complete(prompt: str) -> str | None:
    """
    Sends one chat completion request and returns the text of the first choice.

    Returns None when the provider answered without any choices. Provider
    failures are re-raised as AuthenticationError, UpstreamTimeoutError,
    UpstreamRateLimitError or UpstreamError.
    """
    client = _get_llm_client()
    messages = [SystemMessage(content=""), HumanMessage(content=prompt)]

    try:
        result = await client.agenerate([messages])
    except (openai.APITimeoutError, TimeoutError) as e:
        logger.warning(f"Model provider timed out: {type(e).__name__}")
        raise UpstreamTimeoutError() from e
    except (openai.AuthenticationError, openai.PermissionDeniedError) as e:
        logger.error(f"Model provider rejected the credential (status {getattr(e, 'status_code', 'n/a')})")
        raise AuthenticationError("Model provider rejected the credential") from e
    except openai.RateLimitError as e:
        logger.warning("Model provider rate limit reached.")
        raise UpstreamRateLimitError() from e
    except Exception as e:
        logger.exception(f"Model provider call failed: {type(e).__name__}")
        raise UpstreamError() from e

    generations = result.generations[0] if result.generations else []
    if not generations:
        logger.warning("Model provider returned no choices.")
        return None
    return generations[0].text
