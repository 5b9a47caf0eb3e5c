"""FastAPI dependency injection for services."""

from typing import Annotated

from fastapi import Depends, HTTPException
from slowapi import Limiter
from slowapi.util import get_remote_address

from ..models.wizard import WizardSession
from ..services.paint_data import PaintCatalog, get_paint_catalog
from ..services.wizard_sessions import SessionStore, get_session_store
from .config import get_settings

# Rate limiter, keyed on client address
limiter = Limiter(key_func=get_remote_address)


def analysis_rate_limit() -> str:
    """Limit string for analysis endpoints (read at request time)."""
    return get_settings().rate_limit_analysis


def get_catalog() -> PaintCatalog:
    """Dependency for the paint reference table."""
    return get_paint_catalog()


def get_sessions() -> SessionStore:
    """Dependency for the wizard session store."""
    return get_session_store()


def get_wizard_session(
    session_id: str,
    sessions: Annotated[SessionStore, Depends(get_sessions)],
) -> WizardSession:
    """Resolve the ``session_id`` path parameter or fail with 404."""
    session = sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Wizard session not found")
    return session
