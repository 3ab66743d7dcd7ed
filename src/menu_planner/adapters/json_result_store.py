"""JSON file storage for planning results."""

from dataclasses import dataclass
from pathlib import Path

from menu_planner.domain.menu import Result
from menu_planner.services.planner import ResultStore


@dataclass
class JsonFileResultStore(ResultStore):
    """Writes results as pretty-printed UTF-8 JSON to a fixed path."""

    path: Path

    def save(self, result: Result) -> None:
        """Atomically overwrite the output file with ``result``."""
        staging = self.path.with_name(f".{self.path.name}.tmp")
        try:
            staging.write_text(result.model_dump_json(indent=2), encoding="utf-8")
            staging.replace(self.path)
        except OSError:
            staging.unlink(missing_ok=True)
            raise

    def load(self) -> Result:
        """Read the last saved result back."""
        return Result.model_validate_json(self.path.read_text(encoding="utf-8"))
