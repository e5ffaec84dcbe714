"""JSON file persistence for attempts, sessions and metrics."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol, Type, TypeVar, Union

logger = logging.getLogger(__name__)


class Serializable(Protocol):
    def to_dict(self) -> dict: ...

    @classmethod
    def from_dict(cls, d: dict) -> Any: ...


T = TypeVar('T', bound=Serializable)
PathLike = Union[str, Path]


class FileStorage:
    """Stores value objects as JSON files.

    Any object with ``to_dict()`` and a ``from_dict()`` classmethod can be
    saved and loaded: Metrics, Attempt, Session, Recommendation, Template.

    Example:
        >>> storage = FileStorage('/tmp/ink')
        >>> storage.save(metrics, 'sessions/today/metrics.json')
        >>> storage.load(Metrics, 'sessions/today/metrics.json')
    """

    def __init__(self, root: PathLike | None = None):
        self.root = Path(root) if root is not None else None

    def _resolve(self, path: PathLike) -> Path:
        path = Path(path)
        if self.root is not None and not path.is_absolute():
            return self.root / path
        return path

    def save(self, value: Serializable, path: PathLike) -> Path:
        """Write value as JSON, creating parent directories."""
        target = self._resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, 'w', encoding='utf-8') as f:
            json.dump(value.to_dict(), f, indent=2)
        logger.debug("Saved %s to %s", type(value).__name__, target)
        return target

    def load(self, cls: Type[T], path: PathLike) -> T:
        """Read a JSON file and rebuild it with ``cls.from_dict``.

        Raises:
            OSError: The file cannot be read.
            json.JSONDecodeError: The file is not valid JSON.
        """
        target = self._resolve(path)
        with open(target, encoding='utf-8') as f:
            data = json.load(f)
        return cls.from_dict(data)
