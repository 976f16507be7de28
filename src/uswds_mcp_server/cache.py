"""Two-layer cache for tool responses on the HTTP transport.

The memory layer is per process. The file layer lives under a directory such
as ``/tmp/mcp-cache`` and survives warm restarts of the same container.
"""

from __future__ import annotations

import hashlib
import json
import logging
import re
import time
from pathlib import Path
from typing import Any, Callable

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_-]")


class ResponseCache:
    """Memory plus JSON-file cache with a single time-to-live.

    Args:
        directory: Where the file layer stores entries; created on first write.
        ttl: Seconds an entry stays valid.
        clock: Wall-clock time source, also used for file timestamps.
    """

    def __init__(
        self,
        directory: str | Path = "/tmp/mcp-cache",
        ttl: float = 3600.0,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.directory = Path(directory)
        self.ttl = ttl
        self._clock = clock
        self._memory: dict[str, tuple[float, Any]] = {}

    @staticmethod
    def cache_key(tool: str, arguments: dict[str, Any] | None) -> str:
        """Key for a tool call; argument order does not matter."""
        canonical = json.dumps(arguments or {}, sort_keys=True, separators=(",", ":"))
        digest = hashlib.sha256(canonical.encode("utf-8")).hexdigest()
        return f"tool_{tool}_{digest}"

    def _path(self, key: str) -> Path:
        return self.directory / f"{_UNSAFE_CHARS.sub('_', key)}.json"

    def _fresh(self, timestamp: float) -> bool:
        return self._clock() - timestamp < self.ttl

    def _read_file(self, key: str) -> tuple[float, Any] | None:
        try:
            stored = json.loads(self._path(key).read_text(encoding="utf-8"))
            return float(stored["timestamp"]), stored["data"]
        except FileNotFoundError:
            return None
        except (OSError, ValueError, TypeError, KeyError) as error:
            logger.warning("Unreadable cache file for %s: %r", key, error)
            return None

    def get(self, key: str) -> Any | None:
        """Return the cached value, or ``None`` on a miss or expiry.

        Expired memory entries are dropped; malformed files count as misses.
        """
        entry = self._memory.get(key)
        if entry is not None:
            if self._fresh(entry[0]):
                logger.debug("Cache memory hit: %s", key)
                return entry[1]
            del self._memory[key]

        stored = self._read_file(key)
        if stored is not None and self._fresh(stored[0]):
            logger.debug("Cache file hit: %s", key)
            self._memory[key] = stored
            return stored[1]

        logger.debug("Cache miss: %s", key)
        return None

    def evict_expired(self) -> int:
        """Drop expired memory entries and return how many were removed."""
        expired = [
            key
            for key, (timestamp, _) in self._memory.items()
            if not self._fresh(timestamp)
        ]
        for key in expired:
            del self._memory[key]
        return len(expired)

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` in both layers; file errors only cost the file layer."""
        self.evict_expired()
        timestamp = self._clock()
        self._memory[key] = (timestamp, value)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            self._path(key).write_text(
                json.dumps({"data": value, "timestamp": timestamp}), encoding="utf-8"
            )
        except OSError as error:
            logger.error("Failed to write cache file for %s: %r", key, error)

    def delete(self, key: str) -> None:
        self._memory.pop(key, None)
        self._path(key).unlink(missing_ok=True)

    def clear(self) -> None:
        """Empty both layers."""
        self._memory.clear()
        if self.directory.is_dir():
            for path in self.directory.glob("*.json"):
                path.unlink(missing_ok=True)

    def stats(self) -> dict[str, Any]:
        return {
            "memoryKeys": len(self._memory),
            "ttl": self.ttl,
            "directory": str(self.directory),
        }
