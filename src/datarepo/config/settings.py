"""Package settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

from ..logging import setup_logging


class Settings(BaseSettings):
    """Package settings, read from DATAREPO_* environment variables."""

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "DATAREPO_",
    }

    def configure_logging(self) -> None:
        """Apply the logging settings."""
        setup_logging(verbose=self.verbose, log_file=self.log_file)
