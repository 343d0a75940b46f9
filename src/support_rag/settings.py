from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(slots=True)
class EngineSettings:
    """Runtime configuration for the chat engine."""

    top_k: int = 3
    list_top_k: int = 15
    response_delay_seconds: float = 0.0
    greeting_seed: int | None = None
    log_level: str = "INFO"


@dataclass(slots=True)
class Paths:
    """Locations of the dataset files."""

    data_dir: str = "data"


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def load_settings() -> tuple[EngineSettings, Paths]:
    """Load environment-backed settings and return typed config objects.

    Returns:
        Tuple containing engine settings and dataset path settings.

    Raises:
        ValueError: If a numeric variable cannot be parsed.
    """
    load_dotenv()
    return (
        EngineSettings(
            top_k=_env_int("SUPPORT_RAG_TOP_K", 3),
            list_top_k=_env_int("SUPPORT_RAG_LIST_TOP_K", 15),
            response_delay_seconds=_env_float("SUPPORT_RAG_RESPONSE_DELAY", 0.0),
            greeting_seed=_env_int("SUPPORT_RAG_GREETING_SEED", None),
            log_level=os.getenv("SUPPORT_RAG_LOG_LEVEL", "INFO").upper(),
        ),
        Paths(data_dir=os.getenv("SUPPORT_RAG_DATA_DIR", "data")),
    )
