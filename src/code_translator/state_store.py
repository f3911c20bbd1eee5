"""Application state persistence helpers."""
from __future__ import annotations

import logging
import os
import pickle
import sys
from dataclasses import dataclass
from pathlib import Path

from .input_parser import DEFAULT_MAX_LENGTH
from .storage_warnings import record_storage_warning


LOGGER = logging.getLogger(__name__)

STATE_FILENAME = "code-translator.state.bin"
CURRENT_STATE_VERSION = 1


@dataclass
class AppState:
    """Last accepted input plus window placement."""

    version: int = CURRENT_STATE_VERSION
    last_input: str = ""
    window_geometry: bytes | None = None


def load_state(path: Path | None = None, max_input_length: int = DEFAULT_MAX_LENGTH) -> AppState | None:
    """Load the serialized state when it matches the current version."""

    state_path = _resolve_state_path(path)
    if not state_path.exists():
        return None
    try:
        with state_path.open("rb") as handle:
            payload = pickle.load(handle)
    except (OSError, pickle.PickleError, EOFError, AttributeError) as exc:
        LOGGER.debug("Failed to read state %s: %s", state_path, exc)
        return None
    state = _coerce_state(payload)
    if not state:
        return None
    if getattr(state, "version", None) != CURRENT_STATE_VERSION:
        LOGGER.info(
            "State version mismatch (found=%s expected=%s) – discarding",
            getattr(state, "version", None),
            CURRENT_STATE_VERSION,
        )
        return None
    if len(state.last_input) > max_input_length:
        LOGGER.info("Stored input exceeds %s characters – ignoring it", max_input_length)
        state.last_input = ""
    return state


def save_state(state: AppState, path: Path | None = None) -> bool:
    """Persist ``state`` to disk, returning True on success."""

    state_path = _resolve_state_path(path)
    try:
        state_path.parent.mkdir(parents=True, exist_ok=True)
        with state_path.open("wb") as handle:
            pickle.dump(state, handle)
    except OSError as exc:
        LOGGER.warning("Failed to write state %s: %s", state_path, exc)
        record_storage_warning(scope="state", action="write", path=state_path, detail=str(exc))
        return False
    return True


def get_state_path(path: Path | None = None) -> Path:
    """Return the resolved state path (useful for tests)."""

    return _resolve_state_path(path)


def _resolve_state_path(path: Path | None = None) -> Path:
    if path is not None:
        return Path(path)
    return _resolve_runtime_directory() / STATE_FILENAME


def _resolve_runtime_directory() -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    if os.environ.get("CODE_TRANSLATOR_RUNTIME_DIR"):
        return Path(os.environ["CODE_TRANSLATOR_RUNTIME_DIR"]).expanduser().resolve()
    return Path.cwd()


def _coerce_state(payload: object) -> AppState | None:
    if isinstance(payload, AppState):
        return AppState(
            version=getattr(payload, "version", CURRENT_STATE_VERSION),
            last_input=str(getattr(payload, "last_input", "")),
            window_geometry=getattr(payload, "window_geometry", None),
        )
    if isinstance(payload, dict):
        data = {
            "version": payload.get("version", CURRENT_STATE_VERSION),
            "last_input": str(payload.get("last_input", "")),
            "window_geometry": payload.get("window_geometry"),
        }
        try:
            return AppState(**data)
        except TypeError:
            return None
    return None
