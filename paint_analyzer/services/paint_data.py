"""Static paint reference table.

The dataset is read once at startup and never written. A load failure is
logged and leaves the table empty, so every lookup simply misses.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path

from pydantic import ValidationError

from ..core.config import get_settings
from ..core.logging import log_error
from ..models.vehicle import PaintDataset, PaintRecord

logger = logging.getLogger(__name__)


class PaintCatalog:
    """Read-only view over the paint reference records."""

    def __init__(self, records: list[PaintRecord] | None = None) -> None:
        self._records: tuple[PaintRecord, ...] = tuple(records or ())

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> tuple[PaintRecord, ...]:
        return self._records

    @property
    def is_empty(self) -> bool:
        return not self._records

    def find(self, make: str, model: str, year: str) -> PaintRecord | None:
        """Return the first record matching make, model and year exactly."""
        for record in self._records:
            if record.make == make and record.model == model and record.year == year:
                return record
        return None

    def makes(self) -> list[str]:
        """All distinct makes, sorted."""
        return sorted({r.make for r in self._records})

    def models(self, make: str) -> list[str]:
        """Distinct models for a make, sorted."""
        return sorted({r.model for r in self._records if r.make == make})

    def years(self, make: str | None = None, model: str | None = None) -> list[str]:
        """Distinct years, sorted.

        With both make and model given, only years for that vehicle are
        returned; otherwise every year in the table.
        """
        if make is None or model is None:
            return sorted({r.year for r in self._records})
        return sorted(
            {r.year for r in self._records if r.make == make and r.model == model}
        )

    @classmethod
    def from_file(cls, path: str | Path) -> "PaintCatalog":
        """Load the catalog from a JSON file, or return an empty one on failure."""
        path = Path(path)
        try:
            with path.open(encoding="utf-8") as f:
                raw = json.load(f)
            dataset = PaintDataset.model_validate(raw)
        except FileNotFoundError as e:
            log_error("Paint data file not found", e, path=path)
            return cls()
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            log_error("Failed to load paint data", e, path=path)
            return cls()

        logger.info("Loaded %d paint records from %s", len(dataset.paints), path)
        return cls(dataset.paints)


@lru_cache
def get_paint_catalog() -> PaintCatalog:
    """Get the process-wide catalog, loading it on first use."""
    return PaintCatalog.from_file(get_settings().paint_data_path)
