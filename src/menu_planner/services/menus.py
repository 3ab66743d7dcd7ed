"""Daily menu generation."""

import logging
from dataclasses import dataclass

from menu_planner.domain.menu import MEAL_SLOTS, Menu
from menu_planner.domain.profile import Profile
from menu_planner.services import schema
from menu_planner.services.completion import CompletionClient, CompletionOptions
from menu_planner.services.prompts import MENU_TEMPLATE, render

_logger = logging.getLogger(__name__)


@dataclass
class MenuService:
    """Service that prompts the completion provider for a daily menu."""

    client: CompletionClient
    options: CompletionOptions

    async def generate_menu(
        self, language: str, profile: Profile, additional_notes: str
    ) -> Menu:
        """Generate a six-slot daily menu for ``profile``."""
        prompt = render(
            MENU_TEMPLATE,
            {
                "language": language,
                "profile": profile,
                "format_instructions": schema.format_instructions(Menu),
                "additional_notes": additional_notes,
            },
        )
        _logger.info("Requesting daily menu: language=%s", language)
        raw = await self.client.complete(prompt, self.options)
        menu = schema.parse(Menu, raw)
        _logger.info(
            "Daily menu generated: items=%s",
            sum(len(getattr(menu, slot)) for slot in MEAL_SLOTS),
        )
        return menu
