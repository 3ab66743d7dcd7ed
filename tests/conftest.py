"""Shared test fixtures."""

import json
import logging
from dataclasses import dataclass, field
from types import SimpleNamespace

import httpx
import openai
import pytest

from menu_planner.adapters.openai_completion_client import OpenAICompletionClient
from menu_planner.config import Settings
from menu_planner.domain.menu import Result
from menu_planner.services.completion import CompletionClient, CompletionOptions
from menu_planner.services.groceries import GroceryListService
from menu_planner.services.menus import MenuService
from menu_planner.services.planner import DailyPlanService, ResultStore

OPENAI_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/responses")

MENU_PAYLOAD: dict[str, list[dict[str, str]]] = {
    "breakfast": [
        {"food": "Oatmeal", "quantity": "60g"},
        {"food": "Blueberries", "quantity": "100g"},
    ],
    "morning_snack": [{"food": "Almonds", "quantity": "20g"}],
    "lunch": [
        {"food": "Grilled chicken breast", "quantity": "150g"},
        {"food": "Brown rice", "quantity": "80g"},
        {"food": "Broccoli", "quantity": "120g"},
    ],
    "afternoon_snack": [{"food": "Apple", "quantity": "1 medium"}],
    "dinner": [
        {"food": "Baked salmon", "quantity": "140g"},
        {"food": "Quinoa", "quantity": "70g"},
    ],
    "evening_snack": [{"food": "Carrot sticks", "quantity": "100g"}],
}

GROCERY_PAYLOAD: list[dict[str, str]] = [
    {"food": "Oatmeal", "quantity": "60g"},
    {"food": "Blueberries", "quantity": "100g"},
    {"food": "Almonds", "quantity": "20g"},
    {"food": "Chicken breast", "quantity": "150g"},
    {"food": "Brown rice", "quantity": "80g"},
    {"food": "Broccoli", "quantity": "120g"},
    {"food": "Apple", "quantity": "1"},
    {"food": "Salmon fillet", "quantity": "140g"},
    {"food": "Quinoa", "quantity": "70g"},
    {"food": "Carrots", "quantity": "100g"},
]

TEST_OPTIONS = CompletionOptions(model="gpt-test", max_output_tokens=512, max_retries=2)


@dataclass
class FakeCompletionClient(CompletionClient):
    """Fake completion client replaying scripted answers in order."""

    answers: list[str | Exception] = field(default_factory=list)
    prompts: list[str] = field(default_factory=list)
    options: list[CompletionOptions] = field(default_factory=list)

    async def complete(self, prompt: str, options: CompletionOptions) -> str:
        self.prompts.append(prompt)
        self.options.append(options)
        answer = self.answers.pop(0)
        if isinstance(answer, Exception):
            raise answer
        return answer


@dataclass
class InMemoryResultStore(ResultStore):
    """In-memory result store for tests."""

    saved: list[Result] = field(default_factory=list)

    def save(self, result: Result) -> None:
        self.saved.append(result)


class FakeResponses:
    """Stand-in for ``AsyncOpenAI.responses`` replaying scripted outcomes."""

    def __init__(self, outcomes: list[str | Exception]) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[dict[str, object]] = []

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.calls.append(kwargs)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return SimpleNamespace(output_text=outcome)


class FakeOpenAI:
    """Stand-in for ``AsyncOpenAI``."""

    def __init__(self, outcomes: list[str | Exception]) -> None:
        self.responses = FakeResponses(outcomes)
        self.closed = False

    async def close(self) -> None:
        self.closed = True


def fenced(payload: object) -> str:
    """Wrap a payload the way models usually answer."""
    return f"Here you go:\n```json\n{json.dumps(payload, indent=2)}\n```"


def status_error(error_cls: type[openai.APIStatusError], status_code: int):  # type: ignore[no-untyped-def]
    """Build an OpenAI status error with a real httpx response."""
    response = httpx.Response(status_code, request=OPENAI_REQUEST)
    return error_cls(f"status {status_code}", response=response, body=None)


def openai_completion_client(
    outcomes: list[str | Exception],
) -> tuple[OpenAICompletionClient, FakeOpenAI]:
    """Create an OpenAI completion client over a fake SDK with no backoff."""
    fake = FakeOpenAI(outcomes)
    client = OpenAICompletionClient(
        client=fake,  # type: ignore[arg-type]
        retry_base_delay_seconds=0.0,
        retry_max_delay_seconds=0.0,
    )
    return client, fake


def build_plan_service(
    client: CompletionClient, store: ResultStore
) -> DailyPlanService:
    """Wire the two generators and the orchestrator around ``client``."""
    return DailyPlanService(
        menu_service=MenuService(client=client, options=TEST_OPTIONS),
        grocery_list_service=GroceryListService(client=client, options=TEST_OPTIONS),
        store=store,
    )


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        openai_api_key="openai-key",
        openai_model="gpt-test",
        output_path=tmp_path / "result.json",
        retry_base_delay_seconds=0.0,
        retry_max_delay_seconds=0.0,
    )


@pytest.fixture
def result_store() -> InMemoryResultStore:
    return InMemoryResultStore()


class RecordingHandler(logging.Handler):
    """Logging handler that keeps every record it receives."""

    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    @property
    def text(self) -> str:
        return "\n".join(self.format(record) for record in self.records)


@pytest.fixture
def package_logs():  # type: ignore[no-untyped-def]
    """Record INFO and above from the package logger, which does not propagate."""
    logger = logging.getLogger("menu_planner")
    previous_level = logger.level
    handler = RecordingHandler()
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    yield handler
    logger.removeHandler(handler)
    logger.setLevel(previous_level)
