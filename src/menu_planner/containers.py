"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from menu_planner.adapters.json_result_store import JsonFileResultStore
from menu_planner.adapters.openai_completion_client import OpenAICompletionClient
from menu_planner.config import Settings
from menu_planner.services.completion import CompletionClient
from menu_planner.services.groceries import GroceryListService
from menu_planner.services.menus import MenuService
from menu_planner.services.planner import DailyPlanService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    completion_client: CompletionClient
    menu_service: MenuService
    grocery_list_service: GroceryListService
    daily_plan_service: DailyPlanService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    Raises AuthError before any request is made when no API key is set.
    """
    resolved_settings = settings or Settings()
    completion_client = OpenAICompletionClient.create(
        resolved_settings.openai_api_key,
        timeout_seconds=resolved_settings.openai_timeout_seconds,
        retry_base_delay_seconds=resolved_settings.retry_base_delay_seconds,
        retry_max_delay_seconds=resolved_settings.retry_max_delay_seconds,
    )
    options = resolved_settings.completion_options()
    menu_service = MenuService(client=completion_client, options=options)
    grocery_list_service = GroceryListService(
        client=completion_client, options=options
    )
    daily_plan_service = DailyPlanService(
        menu_service=menu_service,
        grocery_list_service=grocery_list_service,
        store=JsonFileResultStore(resolved_settings.output_path),
    )

    async def close_resources() -> None:
        await completion_client.close()

    return AppContainer(
        settings=resolved_settings,
        completion_client=completion_client,
        menu_service=menu_service,
        grocery_list_service=grocery_list_service,
        daily_plan_service=daily_plan_service,
        close_resources=close_resources,
    )
