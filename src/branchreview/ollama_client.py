import logging
from typing import NamedTuple, Optional

import httpx

from branchreview.config import settings
from branchreview.errors import OllamaConnectionError, OllamaError
from branchreview.models import DiffSummary

logger = logging.getLogger(__name__)

NO_ANALYSIS = "No analysis available"
UNAVAILABLE = "Ollama analysis unavailable. Make sure Ollama is running locally."

PROMPT_TEMPLATE = """You are a code reviewer. Analyze the following git diff and provide:
1. A summary of changes
2. Potential errors or bugs
3. Code quality issues
4. Security concerns
5. Suggestions for improvement

Diff Summary:
Files changed: {files_changed}
Insertions: {insertions}
Deletions: {deletions}

Detailed changes:
{diff}

Provide your analysis in a structured format."""


class Review(NamedTuple):
    """Commentary returned by the model, and whether the model answered at all."""
    text: str
    available: bool


def build_prompt(summary: DiffSummary, diff_text: str, max_chars: Optional[int] = None) -> str:
    """Build the review prompt from the summary and a prefix of the diff."""
    if max_chars is None:
        max_chars = settings.prompt_diff_chars
    return PROMPT_TEMPLATE.format(
        files_changed=summary.files_changed,
        insertions=summary.insertions,
        deletions=summary.deletions,
        diff=diff_text[:max_chars],
    )


class OllamaClient:
    """Client for the Ollama generate API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.base_url = (base_url or settings.ollama_url).rstrip("/")
        self.model = model or settings.ollama_model
        self.timeout = timeout or settings.ollama_timeout

    async def generate(self, prompt: str) -> str:
        """Run a single non-streaming generation and return the response text."""
        url = f"{self.base_url}/api/generate"
        payload = {"model": self.model, "prompt": prompt, "stream": False}

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(url, json=payload)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("Ollama returned %s: %s", e.response.status_code, e.response.text)
            raise OllamaError(f"Ollama returned status {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise OllamaConnectionError(str(e) or type(e).__name__) from e

        try:
            data = response.json()
        except ValueError as e:
            raise OllamaError("Ollama returned a non-JSON response") from e

        if not isinstance(data, dict):
            raise OllamaError("Ollama returned an unexpected payload")
        text = data.get("response")
        if text is not None and not isinstance(text, str):
            raise OllamaError("Ollama returned a non-text response field")
        return text or NO_ANALYSIS

    async def review(self, summary: DiffSummary, diff_text: str) -> Review:
        """Ask the model to review a diff.

        Never raises: when Ollama cannot be used the returned text explains why
        and `available` is False.
        """
        prompt = build_prompt(summary, diff_text)
        logger.info("Requesting review from %s (model %s)", self.base_url, self.model)

        try:
            return Review(text=await self.generate(prompt), available=True)
        except OllamaConnectionError as e:
            logger.warning("Ollama connection failed: %s", e)
            return Review(
                text=(
                    f"Ollama connection failed: {e}. "
                    f"Ensure Ollama is installed and running on {self.base_url}"
                ),
                available=False,
            )
        except OllamaError:
            return Review(text=UNAVAILABLE, available=False)
