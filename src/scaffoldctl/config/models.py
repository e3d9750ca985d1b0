"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, scaffoldctl.toml only contains
overrides. A missing file is the same as an empty one.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

# --- scaffoldctl.toml sections ---


class BuildConfig(BaseModel):
    """[build] section.

    Attributes:
        output_root: Directory new projects are created under. Relative
            paths are taken from the config file's directory.
        options: Default declared options, merged beneath request options.
        template_dir: Directory of user template overrides, laid out like
            the packaged ``templates/<group>/`` tree.
    """

    model_config = {"frozen": True}

    output_root: Path | None = None
    options: dict[str, Any] = Field(default_factory=dict)
    template_dir: Path | None = None


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: Path | None = None


class McpConfig(BaseModel):
    """[mcp] section."""

    model_config = {"frozen": True}

    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000

