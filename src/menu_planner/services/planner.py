"""Orchestration of a full planning run."""

import logging
from dataclasses import dataclass
from typing import Protocol

from menu_planner.domain.menu import Result
from menu_planner.domain.profile import Profile
from menu_planner.services.groceries import GroceryListService
from menu_planner.services.menus import MenuService

_logger = logging.getLogger(__name__)


class ResultStore(Protocol):
    """Persistence interface for planning results."""

    def save(self, result: Result) -> None:
        """Persist ``result``, replacing any previous one."""


@dataclass
class DailyPlanService:
    """Runs menu generation, then grocery list generation, then persists."""

    menu_service: MenuService
    grocery_list_service: GroceryListService
    store: ResultStore

    async def run(
        self, language: str, profile: Profile, additional_notes: str
    ) -> Result:
        """Generate a menu and grocery list and persist the combined result."""
        menu = await self.menu_service.generate_menu(
            language, profile, additional_notes
        )
        grocery_list = await self.grocery_list_service.generate_grocery_list(
            language, menu
        )
        result = Result(menu=menu, grocery_list=grocery_list)
        self.store.save(result)
        _logger.info("Result:\n%s", result.model_dump_json(indent=2))
        return result
