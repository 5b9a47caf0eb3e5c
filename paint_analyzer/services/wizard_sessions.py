"""In-memory wizard sessions.

Each visitor gets a session holding the form, the suggestion lists, the
current step and the last report. Nothing is persisted: sessions live in a
TTL cache and vanish on expiry, eviction or explicit delete.
"""

import asyncio
import logging
import threading
import time
import uuid
from collections.abc import Callable
from functools import lru_cache

from cachetools import TTLCache

from ..core.config import get_settings
from ..core.enums import DamageType, ParkingType, VehicleField, WashFrequency, WizardStep
from ..models.analysis import AnalysisResult
from ..models.wizard import SuggestionView, WizardSession, WizardSessionResponse
from .paint_data import PaintCatalog
from .risk_engine import analyze
from .suggestions import VehicleAutocomplete, initial_lists

logger = logging.getLogger(__name__)


class SessionStore:
    """TTL-bounded session store.

    Thread-safe via a threading.Lock. Reads refresh the entry so that
    active visitors are not expired mid-form.
    """

    def __init__(
        self,
        maxsize: int = 1024,
        ttl: int = 3600,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._sessions: TTLCache[str, WizardSession] = TTLCache(
            maxsize=maxsize, ttl=ttl, timer=timer
        )
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def create(self, catalog: PaintCatalog) -> WizardSession:
        session = WizardSession(
            session_id=uuid.uuid4().hex,
            suggestions=initial_lists(catalog),
        )
        with self._lock:
            self._sessions[session.session_id] = session
        logger.debug("Wizard session created: %s", session.session_id)
        return session

    def get(self, session_id: str) -> WizardSession | None:
        """Get a live session, refreshing its TTL. Returns None on miss."""
        with self._lock:
            session = self._sessions.get(session_id)
            if session is not None:
                self._sessions[session_id] = session
            return session

    def delete(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None


@lru_cache
def get_session_store() -> SessionStore:
    """Get the process-wide session store."""
    settings = get_settings()
    return SessionStore(
        maxsize=settings.session_max_count, ttl=settings.session_ttl_seconds
    )


# =============================================================================
# Wizard operations
# =============================================================================


def autocomplete_for(
    session: WizardSession, catalog: PaintCatalog, hide_delay: float
) -> VehicleAutocomplete:
    return VehicleAutocomplete(
        catalog, session.form, session.suggestions, hide_delay=hide_delay
    )


def set_environment(
    session: WizardSession,
    parking_type: ParkingType | None,
    wash_frequency: WashFrequency | None,
) -> None:
    """Store step-2 answers; an omitted value keeps the previous one."""
    if parking_type is not None:
        session.form.parking_type = parking_type
    if wash_frequency is not None:
        session.form.wash_frequency = wash_frequency


def toggle_damage(session: WizardSession, damage: DamageType) -> None:
    current = session.form.current_damage
    if damage in current:
        session.form.current_damage = [d for d in current if d != damage]
    else:
        session.form.current_damage = [*current, damage]


def go_to_step(session: WizardSession, step: WizardStep | None = None) -> None:
    """Jump to ``step``, or advance one step when it is omitted."""
    if step is None:
        last = max(WizardStep)
        step = WizardStep(min(session.step + 1, last))
    session.step = step


async def run_report(
    session: WizardSession, catalog: PaintCatalog, delay: float
) -> AnalysisResult:
    """Simulate analysis, then replace the session's report wholesale."""
    session.loading = True
    try:
        await asyncio.sleep(delay)
        result = analyze(session.form, catalog)
        session.analysis = result
    finally:
        session.loading = False
    return result


def to_response(
    session: WizardSession, autocomplete: VehicleAutocomplete
) -> WizardSessionResponse:
    """Render the session the way the front end draws it."""
    autocomplete.apply_pending_hides()
    lists = session.suggestions
    return WizardSessionResponse(
        session_id=session.session_id,
        step=session.step,
        form=session.form,
        suggestions={
            field: SuggestionView(
                candidates=list(lists[field].candidates) if lists[field].visible else [],
                visible=lists[field].visible,
            )
            for field in VehicleField
        },
        loading=session.loading,
        analysis=session.analysis,
    )
