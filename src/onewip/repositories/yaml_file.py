"""YAML file repository for the board."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..models import BoardSnapshot
from .protocol import BoardLoadError, BoardSaveError

logger = logging.getLogger(__name__)


class YamlBoardRepository:
    """
    Repository storing the whole board in a single YAML file.

    The document has three keys in order: ``todo`` (list of strings),
    ``wip`` (string or null) and ``done`` (list of strings).
    """

    def __init__(self, board_file: Path) -> None:
        """
        Initialize repository.

        Args:
            board_file: Path to the YAML board file (e.g., .one_wip.yml)
        """
        self.board_file = board_file

    def load(self) -> BoardSnapshot | None:
        """Load the board file, or return None if it does not exist yet."""
        if not self.board_file.exists():
            logger.debug("No board file at %s", self.board_file)
            return None

        try:
            with self.board_file.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except UnicodeDecodeError as e:
            raise BoardLoadError(f"{self.board_file} is not valid UTF-8: {e}") from e
        except yaml.YAMLError as e:
            raise BoardLoadError(f"Invalid YAML in {self.board_file}: {e}") from e
        except OSError as e:
            raise BoardLoadError(f"Cannot read {self.board_file}: {e}") from e

        if not isinstance(data, dict):
            raise BoardLoadError(f"{self.board_file} does not contain a board mapping")

        try:
            snapshot = BoardSnapshot(**data)
        except (TypeError, ValidationError) as e:
            raise BoardLoadError(f"Invalid board in {self.board_file}: {e}") from e

        logger.info(
            "Loaded board from %s (todo=%d, wip=%s, done=%d)",
            self.board_file,
            len(snapshot.todo),
            "yes" if snapshot.wip is not None else "no",
            len(snapshot.done),
        )
        return snapshot

    def save(self, snapshot: BoardSnapshot) -> None:
        """Write the board file atomically (temp file + replace)."""
        data = snapshot.model_dump(mode="json")
        directory = self.board_file.parent

        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.board_file.name}.", suffix=".tmp", dir=directory
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    yaml.safe_dump(
                        data, f, default_flow_style=False, sort_keys=False, allow_unicode=True
                    )
                os.replace(tmp_name, self.board_file)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except (OSError, UnicodeError, yaml.YAMLError) as e:
            raise BoardSaveError(f"Cannot write {self.board_file}: {e}") from e

        logger.debug("Board saved to %s", self.board_file)
