"""Rate repositories backed by JSON catalog files."""

from __future__ import annotations

import logging
from pathlib import Path

from cabinet_pricing.application.config import catalog_to_snapshot, load_catalog
from cabinet_pricing.domain.rates import RateSnapshot

logger = logging.getLogger(__name__)


class JsonRateRepository:
    """Serves rate snapshots read from a JSON catalog file.

    The catalog is parsed once and the snapshot reused until the file's
    modification time changes, so every calculation started in between
    sees the same rates.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._snapshot: RateSnapshot | None = None
        self._mtime: float | None = None

    def load(self) -> RateSnapshot:
        """Return the rate snapshot, re-reading the file if it changed.

        Raises:
            ConfigError: If the file is missing, malformed or fails validation.
        """
        mtime = self._current_mtime()
        if self._snapshot is None or mtime != self._mtime:
            catalog = load_catalog(self.path)
            self._snapshot = catalog_to_snapshot(catalog)
            self._mtime = mtime
            logger.info(
                f"Loaded rate catalog {self.path} "
                f"(version {self._snapshot.version or 'unversioned'}, "
                f"{len(self._snapshot.cabinet_types)} cabinet types)"
            )
        return self._snapshot

    def _current_mtime(self) -> float | None:
        try:
            return self.path.stat().st_mtime
        except OSError:
            # load_catalog reports the missing file
            return None


class InMemoryRateRepository:
    """Serves a fixed snapshot; used by tests and embedding applications."""

    def __init__(self, snapshot: RateSnapshot) -> None:
        self._snapshot = snapshot

    def load(self) -> RateSnapshot:
        return self._snapshot
