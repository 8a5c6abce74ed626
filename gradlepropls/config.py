"""Server settings read from the environment and the command line."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

CATALOG_ENV = "GRADLEPROPLS_CATALOG"
TRACE_ENV = "GRADLEPROPLS_TRACE"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ServerSettings:
    """
    Settings for the gradle.properties language server.

    Attributes:
        catalog_path: YAML catalog to load instead of the packaged one
        trace: Log the resolved completion fragment of every request
    """

    catalog_path: Path | None = None
    trace: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ServerSettings:
        if environ is None:
            environ = os.environ

        catalog = environ.get(CATALOG_ENV, "").strip()
        trace = environ.get(TRACE_ENV, "").strip().lower() in _TRUTHY

        return cls(
            catalog_path=Path(catalog).expanduser() if catalog else None,
            trace=trace,
        )
