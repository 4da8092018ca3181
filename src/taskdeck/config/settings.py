"""Application settings."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    data_dir: Path = Field(
        default=Path(".taskdeck"),
        description="Directory holding tasks and preferences",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    missing_task_policy: Literal["ignore", "raise"] = Field(
        default="ignore",
        description="What to do when an operation targets an unknown task ID",
    )

    seed_sample_data: bool = Field(
        default=False,
        description="Load sample tasks on startup when no tasks are stored",
    )

    model_config = {
        "env_prefix": "TASKDECK_",
    }
