from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from rich.console import Console

from jr_common.api import configure_logging
from jr_logger.api import JobsEnvironment, RunCatalogService, load_environment

__all__ = ["UIContext", "configure_logging"]


@dataclass
class UIContext:
    """Container for CLI services and state, initialized lazily."""

    data_path: Optional[Path] = None
    config_path: Optional[Path] = None

    _console: Optional[Console] = None
    _environment: Optional[JobsEnvironment] = None
    _catalog: Optional[RunCatalogService] = None

    @property
    def console(self) -> Console:
        if self._console is None:
            self._console = Console(highlight=False)
        return self._console

    @console.setter
    def console(self, value: Console) -> None:
        self._console = value

    @property
    def environment(self) -> JobsEnvironment:
        if self._environment is None:
            self._environment = load_environment(
                self.config_path, data_path=self.data_path
            )
        return self._environment

    @property
    def catalog(self) -> RunCatalogService:
        if self._catalog is None:
            self._catalog = RunCatalogService(self.environment)
        return self._catalog

    def reset(self, *, data_path: Optional[Path], config_path: Optional[Path]) -> None:
        """Apply global CLI options and drop cached services."""
        self.data_path = data_path
        self.config_path = config_path
        self._console = None
        self._environment = None
        self._catalog = None
