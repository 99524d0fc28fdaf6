"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_BOARD_FILE = ".one_wip.yml"


class Settings(BaseSettings):
    """Application settings."""

    board_file: Path = Field(
        default=Path(DEFAULT_BOARD_FILE),
        description="YAML file the board is loaded from and saved to",
    )

    tick_interval: float = Field(
        default=0.25,
        gt=0,
        description="Seconds between redraw ticks of the terminal front end",
    )

    save_queue_size: int = Field(
        default=100,
        ge=1,
        description="Maximum snapshots waiting to be written before the UI blocks",
    )

    save_retries: int = Field(
        default=3,
        ge=0,
        description="Extra attempts for a failed save before it is reported",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "ONEWIP_",
    }
