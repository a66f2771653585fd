"""Provider settings read from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_API_BASE = "http://localhost:11434/v1"
DEFAULT_API_KEY = "lm-studio"
DEFAULT_MODEL = "minicpm-v"


@dataclass(frozen=True, slots=True)
class ProviderSettings:
    """Where to reach an OpenAI-compatible endpoint and which model to use."""

    api_base: str = DEFAULT_API_BASE
    api_key: str = DEFAULT_API_KEY
    model: str = DEFAULT_MODEL

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> ProviderSettings:
        """Build settings from DIM_API_BASE, DIM_API_KEY and DIM_MODEL.

        OLLAMA_API_BASE is honoured when DIM_API_BASE is unset.
        """
        env = os.environ if env is None else env
        api_base = (
            env.get("DIM_API_BASE")
            or env.get("OLLAMA_API_BASE")
            or DEFAULT_API_BASE
        )
        return cls(
            api_base=api_base.rstrip("/"),
            api_key=env.get("DIM_API_KEY") or DEFAULT_API_KEY,
            model=env.get("DIM_MODEL") or DEFAULT_MODEL,
        )
