"""Runtime configuration for formforge."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class FormforgeConfig:
    """Settings read from the environment.

    Attributes:
        schema_path: Default form schema document
        strict: Check validator wiring when a dispatcher is built
        log_level: Logging level name for the CLI
    """

    schema_path: Path
    strict: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, base_path: Path | None = None) -> FormforgeConfig:
        """Create config from environment variables.

        Resolution order for the schema path:
        1. FORMFORGE_SCHEMA_PATH env var
        2. Default: {base_path}/forms.yaml (base_path defaults to the cwd)
        """
        schema_path = os.environ.get("FORMFORGE_SCHEMA_PATH")
        if schema_path:
            path = Path(schema_path)
        else:
            path = (base_path or Path.cwd()) / "forms.yaml"

        strict = os.environ.get("FORMFORGE_STRICT", "1").strip().lower() in _TRUTHY
        log_level = os.environ.get("FORMFORGE_LOG_LEVEL", "WARNING").strip().upper()

        return cls(schema_path=path, strict=strict, log_level=log_level)

    @property
    def log_level_number(self) -> int:
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.WARNING

    def configure_logging(self) -> None:
        logging.basicConfig(
            level=self.log_level_number,
            format="%(levelname)s %(name)s: %(message)s",
        )
