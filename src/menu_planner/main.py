"""Process entrypoint for a single planning run."""

import asyncio
import logging

from menu_planner.app_logging import configure_logging
from menu_planner.config import Settings
from menu_planner.containers import AppContainer, build_container
from menu_planner.domain.errors import MenuPlannerError
from menu_planner.domain.menu import Result
from menu_planner.domain.profile import SAMPLE_PROFILE, Profile, load_profile

_logger = logging.getLogger(__name__)


async def run_once(container: AppContainer, profile: Profile) -> Result:
    """Run one planning cycle and release container resources afterwards."""
    settings = container.settings
    try:
        return await container.daily_plan_service.run(
            settings.menu_language, profile, settings.additional_notes
        )
    finally:
        await container.close_resources()


def main(settings: Settings | None = None) -> int:
    """Generate a menu and grocery list; return the process exit status."""
    configure_logging()
    try:
        resolved_settings = settings or Settings()
        profile = (
            load_profile(resolved_settings.profile_path)
            if resolved_settings.profile_path
            else SAMPLE_PROFILE
        )
    except (OSError, ValueError) as exc:
        _logger.error("Invalid configuration or profile: %s", exc)
        return 1
    try:
        container = build_container(resolved_settings)
        asyncio.run(run_once(container, profile))
    except MenuPlannerError as exc:
        _logger.error("Planning run failed (%s): %s", type(exc).__name__, exc)
        return 1
    except OSError as exc:
        _logger.error(
            "Could not write result to %s: %s", resolved_settings.output_path, exc
        )
        return 1
    _logger.info("Result written to %s", resolved_settings.output_path)
    return 0
