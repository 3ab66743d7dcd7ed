"""Grocery list generation from a menu."""

import logging
from dataclasses import dataclass

from menu_planner.domain.menu import GroceryList, Menu
from menu_planner.services import schema
from menu_planner.services.completion import CompletionClient, CompletionOptions
from menu_planner.services.prompts import GROCERY_TEMPLATE, render

_logger = logging.getLogger(__name__)


@dataclass
class GroceryListService:
    """Service that turns a generated menu into a grocery list."""

    client: CompletionClient
    options: CompletionOptions

    async def generate_grocery_list(self, language: str, menu: Menu) -> GroceryList:
        """Generate the grocery list for ``menu``."""
        prompt = render(
            GROCERY_TEMPLATE,
            {
                "language": language,
                "menu": menu,
                "format_instructions": schema.format_instructions(GroceryList),
            },
        )
        _logger.info("Requesting grocery list: language=%s", language)
        raw = await self.client.complete(prompt, self.options)
        grocery_list = schema.parse(GroceryList, raw)
        _logger.info("Grocery list generated: items=%s", len(grocery_list.root))
        return grocery_list
