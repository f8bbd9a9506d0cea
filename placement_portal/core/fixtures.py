"""
Seed data loader.

Fixtures are JSON arrays, one file per entity, bundled in
placement_portal/fixtures/. A missing or malformed fixture never fails the
caller: it is logged and replaced by an empty collection.
"""
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from placement_portal.core.exceptions import FixtureLoadError
from placement_portal.core.logging import get_logger

logger = get_logger(__name__)

BUNDLED_FIXTURES_DIR = Path(__file__).resolve().parent.parent / "fixtures"


def read_fixture(directory: Path, name: str) -> List[Dict[str, Any]]:
    """
    Read <directory>/<name>.json.

    Raises:
        FixtureLoadError: file missing, unreadable, not JSON, or not a list of objects.
    """
    path = directory / f"{name}.json"
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FixtureLoadError(name, str(e)) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise FixtureLoadError(name, f"invalid JSON: {e}") from e

    if not isinstance(data, list) or not all(isinstance(row, dict) for row in data):
        raise FixtureLoadError(name, "expected a JSON array of objects")

    return data


class FixtureLoader:
    """Loads each fixture once and hands out copies."""

    def __init__(self, directory: Optional[str] = None):
        self.directory = Path(directory) if directory else BUNDLED_FIXTURES_DIR
        self._cache: Dict[str, List[Dict[str, Any]]] = {}

    def load(self, name: str) -> List[Dict[str, Any]]:
        if name not in self._cache:
            try:
                self._cache[name] = read_fixture(self.directory, name)
            except FixtureLoadError as e:
                logger.warning(
                    "fixture_load_failed",
                    fixture=name,
                    directory=str(self.directory),
                    reason=e.reason,
                )
                self._cache[name] = []
        # Deep copy through JSON keeps the cached seed pristine
        return json.loads(json.dumps(self._cache[name]))
