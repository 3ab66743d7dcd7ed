"""Prompt templates and rendering."""

from collections.abc import Mapping
from string import Formatter

from pydantic import BaseModel

from menu_planner.domain.errors import MissingVariableError

MENU_TEMPLATE = (
    "You are an experienced nutritionist with 20 years of practice. "
    "Please generate a daily menu in {language} for a person with the "
    "following profile: {profile}. "
    "Respect the following format: {format_instructions} "
    "Additional notes: {additional_notes}"
)

GROCERY_TEMPLATE = (
    "You are an experienced nutritionist. For the following menu: {menu}, "
    "please create a grocery list for your client in {language}. "
    "Respect the following format: {format_instructions}"
)

_FORMATTER = Formatter()


def render(template: str, variables: Mapping[str, object]) -> str:
    """Substitute ``{name}`` tokens in ``template`` with ``variables``.

    Values are inserted as-is and never re-scanned, so JSON inside a value
    needs no escaping. ``{{`` and ``}}`` produce literal braces.
    """
    parts: list[str] = []
    for literal, token, _, _ in _FORMATTER.parse(template):
        parts.append(literal)
        if token is None:
            continue
        if token not in variables:
            raise MissingVariableError(token)
        parts.append(stringify(variables[token]))
    return "".join(parts)


def stringify(value: object) -> str:
    """Return the prompt form of a template variable."""
    if isinstance(value, str):
        return value
    if isinstance(value, BaseModel):
        return value.model_dump_json(by_alias=True)
    return str(value)
