"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, empdir.toml only holds overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class RunConfig(BaseModel):
    """[run] section — batch application of commands."""

    model_config = {"frozen": True}

    stop_on_error: bool = False


class ShellConfig(BaseModel):
    """[shell] section — interactive loop."""

    model_config = {"frozen": True}

    prompt: str = "empdir> "

