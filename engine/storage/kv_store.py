from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_STORE_PATH = Path(__file__).resolve().parents[2] / "runtime" / "cache" / "scores.yaml"


class KeyValueStore:
    """
    Integer key-value persistence.

    get() returns None for anything missing or unreadable and set() is
    best-effort: implementations never raise on I/O problems.
    """

    def get(self, key: str) -> Optional[int]:
        raise NotImplementedError

    def set(self, key: str, value: int) -> bool:
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    def __init__(self, initial: Optional[Dict[str, int]] = None):
        self._data: Dict[str, int] = dict(initial or {})

    def get(self, key: str) -> Optional[int]:
        return self._data.get(key)

    def set(self, key: str, value: int) -> bool:
        self._data[key] = int(value)
        return True


def _coerce_int(value) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        # .inf and .nan are valid YAML floats
        return None


class YamlKeyValueStore(KeyValueStore):
    """Flat mapping of string keys to ints kept in a single YAML file."""

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path is not None else DEFAULT_STORE_PATH

    def _read_all(self) -> Dict[str, object]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict):
            return {}
        return data

    def get(self, key: str) -> Optional[int]:
        try:
            data = self._read_all()
        except (OSError, ValueError, yaml.YAMLError) as exc:
            # ValueError covers UnicodeDecodeError from undecodable files
            logger.warning("could not read %s: %s", self.path, exc)
            return None
        if key not in data:
            return None
        value = _coerce_int(data[key])
        if value is None:
            logger.warning("ignoring non-integer value for %r in %s", key, self.path)
        return value

    def set(self, key: str, value: int) -> bool:
        try:
            try:
                data = self._read_all()
            except (ValueError, yaml.YAMLError):
                # unreadable file gets replaced
                data = {}
            data[key] = int(value)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                yaml.safe_dump(data, f, default_flow_style=False, sort_keys=True)
        except (OSError, ValueError, yaml.YAMLError) as exc:
            logger.warning("could not write %s: %s", self.path, exc)
            return False
        return True
