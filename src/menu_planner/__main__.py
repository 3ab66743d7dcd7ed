"""Allow ``python -m menu_planner``."""

from menu_planner.main import main

raise SystemExit(main())
