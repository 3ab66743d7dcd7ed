"""Text completion interface."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class CompletionOptions:
    """Per-call options for a completion request."""

    model: str
    max_output_tokens: int
    max_retries: int


class CompletionClient(Protocol):
    """Interface for a blocking request/response completion provider."""

    async def complete(self, prompt: str, options: CompletionOptions) -> str:
        """Send ``prompt`` and return the raw text answer."""
