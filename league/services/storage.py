import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from league.core.config import settings
from league.models import GameData

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when a snapshot cannot be written or read back."""


class GameDataStorage:
    def __init__(self, path: Optional[Path] = None):
        """Initialize the storage service with the snapshot file location."""
        self.path = Path(path or settings.DATA_FILE)

    async def save(self, game_data: GameData) -> dict[str, Any]:
        """Write a snapshot, replacing the previous one atomically."""
        payload = game_data.model_dump(mode="json", by_alias=True)

        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                delete=False,
                suffix=".json",
                dir=self.path.parent,
            ) as tmp:
                json.dump(payload, tmp, indent=2)
                tmp_path = Path(tmp.name)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.exception("Error saving game data to %s", self.path)
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise StorageError(f"Failed to save game data: {e}") from e

        logger.info(
            "Saved %d player(s), %d match(es), %d bet(s) to %s",
            len(game_data.players), len(game_data.matches), len(game_data.bets), self.path,
        )
        return {
            "success": True,
            "url": str(self.path),
            "savedAt": game_data.last_saved.isoformat(),
        }

    async def load(self) -> GameData | None:
        """Read the latest snapshot, or None if nothing has been saved yet."""
        if not self.path.exists():
            logger.info("No saved game data found at %s", self.path)
            return None

        try:
            raw = self.path.read_text(encoding="utf-8")
            return GameData.model_validate_json(raw)
        except (OSError, ValidationError) as e:
            logger.exception("Error loading game data from %s", self.path)
            raise StorageError(f"Failed to load game data: {e}") from e

    async def clear(self) -> None:
        """Delete the stored snapshot if there is one."""
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            logger.exception("Error clearing game data at %s", self.path)
            raise StorageError(f"Failed to clear game data: {e}") from e
