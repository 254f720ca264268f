# src/bem_classnames/utils/load_config.py

"""Load JSON settings from a <data/> directory with mtime-aware caching.

Modes:
- "raw"             -> return parsed JSON as-is
- "validated_dict"  -> return dict[str, Any] after an optional validator

Used by the namespace settings reader and by tests needing hot reload.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any, Literal

# --- optional json5 support (no hard dependency) -----------------------------
try:  # mypy: json5 may be missing in most envs
    import json5 as _json5
except ImportError:  # pragma: no cover - only hit when json5 missing
    _json5 = None  # type: ignore[assignment]

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "validated_dict"]
DATA_DIR_ENV_VARS: tuple[str, ...] = ("DATA_DIR", "BEM_CLASSNAMES_DATA_DIR")

__all__ = [
    "Mode",
    "DATA_DIR_ENV_VARS",
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested settings file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a settings file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't have the expected top-level shape."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# key: path, mtime, mode, encoding, allow_comments
_CONFIG_CACHE: dict[tuple[Path, float, str, str, bool], Any] = {}


def clear_config_cache() -> None:
    """Empty the in-memory settings cache (pytest / hot reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    """Compute candidate data dirs walking up from start (default: this package)."""
    start = (start or Path(__file__)).resolve()
    return [(p / "data").resolve() for p in [start, *start.parents]]


def _default_data_dir(start: Path | None = None) -> Path:
    """Return the first existing candidate directory or raise."""
    for cand in _candidate_data_dirs(start):
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\n"
        "Tried:\n  " + "\n  ".join(str(p) for p in _candidate_data_dirs(start))
    )


def _env_data_dir() -> Path | None:
    for var in DATA_DIR_ENV_VARS:
        v = os.environ.get(var)
        if v:
            return Path(os.path.expanduser(v)).resolve()
    return None


def _read(path: Path, encoding: str, allow_comments: bool) -> Any:
    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            if allow_comments:
                if _json5 is None:
                    raise ConfigParseError(
                        "json5 requested (allow_comments=True) but not installed"
                    )
                return _json5.load(f)
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
    allow_comments: bool = False,
) -> Any:
    """Load <data>/<file>.json, parse, check the shape required by `mode`, cache.

    The base directory is resolved as: explicit `base_dir` > env
    (`DATA_DIR`, `BEM_CLASSNAMES_DATA_DIR`) > first `data/` found walking up
    from this package. Results obtained through a validator are
    never cached.
    """
    if base_dir is None:
        base_dir = _env_data_dir() or _default_data_dir()
    data_dir = base_dir.resolve()

    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, mode, encoding, allow_comments)
    if validator is None:
        with _CACHE_LOCK:
            if cache_key in _CONFIG_CACHE:
                log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
                return _CONFIG_CACHE[cache_key]

    data = _read(path, encoding, allow_comments)

    if mode == "raw":
        result: Any = data
    elif mode == "validated_dict":
        if not isinstance(data, dict):
            raise ConfigTypeError(
                f"{path.name}: expected dict for mode 'validated_dict', got {type(data).__name__}"
            )
        if validator is not None:
            try:
                data = validator(data)
            except Exception as e:
                raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
        result = data
    else:
        raise ValueError(f"Unknown mode '{mode}'")

    if validator is None:
        with _CACHE_LOCK:
            _CONFIG_CACHE[cache_key] = result
        log.debug("Config cache MISS → STORED: %s (mode=%s)", path.name, mode)
    else:
        log.debug("Config loaded (validator present, not cached): %s", path.name)

    return result


# ── Context manager to temporarily override the data directory ───────────────
class temp_data_dir:
    """Temporarily point the loader at another data directory via env."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get("DATA_DIR")
        os.environ["DATA_DIR"] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop("DATA_DIR", None)
        else:
            os.environ["DATA_DIR"] = self._old
        clear_config_cache()
