"""Cascading make → model → year autocomplete.

Each field keeps its own candidate list and a visibility flag. Typing
narrows the field's *current* list by case-insensitive prefix; clearing the
field or deleting a character resets the list to the field's full set.
Picking a value (by click or because a single candidate remains) clears the
dependent fields and refreshes their lists from the reference table.

Blur does not hide a list immediately: hiding is scheduled
``hide_delay`` seconds later so a click on a suggestion can still register.
Due hides are applied lazily at the start of every operation.
"""

import logging
import time
from collections.abc import Callable

from pydantic import BaseModel

from ..core.enums import VehicleField
from ..models.analysis import FormInput
from .paint_data import PaintCatalog

logger = logging.getLogger(__name__)

_FORM_ATTRS: dict[VehicleField, str] = {
    VehicleField.MAKE: "car_make",
    VehicleField.MODEL: "car_model",
    VehicleField.YEAR: "car_year",
}

# Lists that fall back to their full set once a blur-hide fires
_RESET_ON_HIDE = {VehicleField.MAKE, VehicleField.YEAR}


class SuggestionList(BaseModel):
    candidates: list[str] = []
    visible: bool = False
    hide_at: float | None = None  # monotonic deadline of a pending blur-hide


def filter_by_prefix(candidates: list[str], prefix: str) -> list[str]:
    """Keep candidates starting with ``prefix``, ignoring case."""
    needle = prefix.lower()
    return sorted(c for c in candidates if c.lower().startswith(needle))


def initial_lists(catalog: PaintCatalog) -> dict[VehicleField, SuggestionList]:
    """Suggestion lists right after the table has loaded."""
    return {
        VehicleField.MAKE: SuggestionList(candidates=catalog.makes()),
        VehicleField.MODEL: SuggestionList(),
        VehicleField.YEAR: SuggestionList(candidates=catalog.years()),
    }


class VehicleAutocomplete:
    """Applies form events to a form and its suggestion lists in place."""

    def __init__(
        self,
        catalog: PaintCatalog,
        form: FormInput,
        lists: dict[VehicleField, SuggestionList],
        hide_delay: float = 0.15,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.catalog = catalog
        self.form = form
        self.lists = lists
        self.hide_delay = hide_delay
        self._clock = clock

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def value(self, field: VehicleField) -> str:
        return getattr(self.form, _FORM_ATTRS[field])

    def _set_value(self, field: VehicleField, value: str) -> None:
        setattr(self.form, _FORM_ATTRS[field], value)

    def full_candidates(self, field: VehicleField) -> list[str]:
        """The unfiltered candidate set for a field given its parents."""
        if field is VehicleField.MAKE:
            return self.catalog.makes()
        if field is VehicleField.MODEL:
            return self.catalog.models(self.form.car_make)
        if not self.form.car_model:
            return self.catalog.years()
        return self.catalog.years(self.form.car_make, self.form.car_model)

    def _show(self, field: VehicleField, candidates: list[str]) -> None:
        lst = self.lists[field]
        lst.candidates = candidates
        lst.visible = True
        lst.hide_at = None

    def _hide(self, field: VehicleField, clear: bool = False) -> None:
        lst = self.lists[field]
        lst.visible = False
        lst.hide_at = None
        if clear:
            lst.candidates = []

    def apply_pending_hides(self) -> None:
        """Hide every list whose post-blur delay has elapsed."""
        now = self._clock()
        for field, lst in self.lists.items():
            if lst.hide_at is not None and lst.hide_at <= now:
                self._hide(field)
                if field in _RESET_ON_HIDE:
                    lst.candidates = self.full_candidates(field)

    def visible_suggestions(self, field: VehicleField) -> list[str]:
        """What the dropdown under ``field`` currently shows."""
        self.apply_pending_hides()
        lst = self.lists[field]
        return list(lst.candidates) if lst.visible else []

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    def type_text(self, field: VehicleField, value: str, deleting: bool = False) -> None:
        """Handle a keystroke that changed ``field`` to ``value``."""
        self.apply_pending_hides()
        self._set_value(field, value)
        for dependent in field.dependents:
            self._set_value(dependent, "")

        if self.catalog.is_empty:
            return

        if value == "" or deleting:
            self._show(field, self.full_candidates(field))
            return

        filtered = filter_by_prefix(self.lists[field].candidates, value)
        self._show(field, filtered)
        if len(filtered) == 1:
            logger.debug("Auto-selecting %s=%s", field.value, filtered[0])
            self._choose(field, filtered[0])

    def focus(self, field: VehicleField) -> None:
        self.apply_pending_hides()
        if self.catalog.is_empty:
            return

        current = self.value(field)
        if field is VehicleField.MAKE:
            source = self.lists[field].candidates
        else:
            source = self.full_candidates(field)
        self._show(field, filter_by_prefix(source, current))

        for dependent in field.dependents:
            self._hide(dependent, clear=True)

    def blur(self, field: VehicleField) -> None:
        """Schedule hiding the field's list after the click grace period.

        Scheduled even when the list is already hidden so that make and year
        still reset to their full sets once the delay elapses.
        """
        self.apply_pending_hides()
        self.lists[field].hide_at = self._clock() + self.hide_delay

    def select(self, field: VehicleField, value: str) -> bool:
        """Pick a suggestion from the visible list.

        Returns False when the list is no longer showing or ``value`` is not
        one of its candidates; the form is left untouched in that case.
        """
        self.apply_pending_hides()
        lst = self.lists[field]
        if not lst.visible or value not in lst.candidates:
            return False
        self._choose(field, value)
        return True

    def _choose(self, field: VehicleField, value: str) -> None:
        """Commit ``value``; picking a suggestion also blurs the input."""
        self._set_value(field, value)
        self._hide(field, clear=True)
        self.lists[field].hide_at = self._clock() + self.hide_delay
        for dependent in field.dependents:
            self._set_value(dependent, "")
        for dependent in field.dependents:
            self.lists[dependent].candidates = self.full_candidates(dependent)
