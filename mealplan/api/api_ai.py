import asyncio
import logging
import re
from typing import List, Optional

import openai
from openai import OpenAI
from fastapi import APIRouter
from pydantic import BaseModel

from mealplan.logic.shopping.name_cleaning import clean_names_with_fallback
from mealplan.utilities.config import (
    OPENAI_API_KEY, OPENAI_MODEL, NAME_CLEANING_ENABLED, NAME_CLEANING_MAX_ATTEMPTS, NAME_CLEANING_TIMEOUT
)
from mealplan.utilities.constants import NAME_CLEANING_PROMPT, TRANSLATE_RULE

logger = logging.getLogger(__name__)

# Errors worth another attempt; anything else (bad key, bad request) fails at once.
RETRYABLE_ERRORS = (
    openai.APIConnectionError,
    openai.APITimeoutError,
    openai.RateLimitError,
    openai.InternalServerError,
)
INITIAL_BACKOFF = 0.5
MAX_BACKOFF = 4.0


# === Helper: Get OpenAI Client ===
def _get_openai_client() -> Optional[OpenAI]:
    """Return an OpenAI client if OPENAI_API_KEY is set, otherwise None."""
    if not OPENAI_API_KEY:
        return None
    return OpenAI(api_key=OPENAI_API_KEY)


# === Text Cleaning Helpers ===
def _strip_code_fences(text: str) -> str:
    """Remove common markdown code fences and leading/trailing whitespace."""
    text = re.sub(r"```(?:\w+)?\n(.*?)```", r"\1", text, flags=re.S)
    text = re.sub(r"^```|```$", "", text)
    return text.strip()


def _clean_line(line: str) -> str:
    """Drop list markers ("1.", "-", "*"), quotes and a trailing "| category" hint."""
    line = re.sub(r"^\s*(?:\d+[.)]|[-*•])\s*", "", line)
    line = line.split("|", 1)[0]
    return line.strip().strip('"\'').strip()


def parse_cleaned_names(text: str) -> List[str]:
    """Split a model answer into one cleaned name per non-empty line."""
    lines = _strip_code_fences(text or "").splitlines()
    return [cleaned for cleaned in (_clean_line(line) for line in lines) if cleaned]


def build_prompt(names: List[str], translate: bool = False) -> str:
    return NAME_CLEANING_PROMPT.format(
        translate_rule=TRANSLATE_RULE if translate else "",
        count=len(names),
        names="\n".join(names),
    )


class OpenAINameCleaner:
    """Name cleaner backed by the OpenAI Responses API.

    The blocking client call runs in a worker thread. Transient API errors are
    retried with exponential backoff; the caller's timeout still bounds the
    whole exchange.
    """

    def __init__(self, client: OpenAI, model: str = OPENAI_MODEL,
                 max_attempts: int = NAME_CLEANING_MAX_ATTEMPTS):
        self.client = client
        self.model = model
        self.max_attempts = max(1, max_attempts)

    async def _ask(self, prompt: str) -> str:
        last_error: Optional[Exception] = None
        for attempt in range(self.max_attempts):
            try:
                response = await asyncio.to_thread(self.client.responses.create, model=self.model, input=prompt)
                return response.output_text or ""
            except RETRYABLE_ERRORS as e:
                last_error = e
                if attempt < self.max_attempts - 1:
                    delay = min(INITIAL_BACKOFF * (2 ** attempt), MAX_BACKOFF)
                    logger.warning("Name cleaning attempt %d failed (%s); retrying in %.1fs", attempt + 1, e, delay)
                    await asyncio.sleep(delay)
        raise last_error

    async def clean_names(self, names: List[str], translate: bool = False) -> List[str]:
        if not names:
            return []
        text = await self._ask(build_prompt(list(names), translate=translate))
        cleaned = parse_cleaned_names(text)
        logger.debug("Model cleaned %d names into %d lines", len(names), len(cleaned))
        return cleaned


def build_default_cleaner() -> Optional[OpenAINameCleaner]:
    """Cleaner configured from the environment, or None when cleaning is off or no key is set."""
    if not NAME_CLEANING_ENABLED:
        logger.info("Name cleaning disabled by configuration")
        return None
    client = _get_openai_client()
    if client is None:
        logger.warning("OPENAI_API_KEY not set; shopping list names will not be cleaned.")
        return None
    return OpenAINameCleaner(client)


# === FastAPI Endpoint ===
router = APIRouter(prefix="/api/ai")


class CleanNamesRequest(BaseModel):
    names: List[str]
    translate: bool = False


class CleanNamesResponse(BaseModel):
    names: List[str]
    degraded_reason: Optional[str] = None


@router.post("/clean-names", response_model=CleanNamesResponse)
async def clean_names_ai(request: CleanNamesRequest):
    """Preview how the configured cleaner would rename a batch of ingredient names."""
    result = await clean_names_with_fallback(request.names, build_default_cleaner(),
                                             timeout=NAME_CLEANING_TIMEOUT, translate=request.translate)
    return CleanNamesResponse(names=result.names, degraded_reason=result.degraded_reason)
