"""FastAPI route definitions for the paint risk wizard API."""

import asyncio
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from ..core.config import Settings, get_settings
from ..core.dependencies import (
    analysis_rate_limit,
    get_catalog,
    get_sessions,
    get_wizard_session,
    limiter,
)
from ..core.enums import DamageType, ParkingType, VehicleField, WashFrequency
from ..models.analysis import AnalysisResult, FormInput
from ..models.wizard import (
    EnvironmentRequest,
    FieldInputRequest,
    SelectSuggestionRequest,
    SelectSuggestionResponse,
    StepRequest,
    WizardSession,
    WizardSessionResponse,
)
from ..services import wizard_sessions
from ..services.paint_data import PaintCatalog
from ..services.risk_engine import analyze
from ..services.wizard_sessions import SessionStore

router = APIRouter()

CatalogDep = Annotated[PaintCatalog, Depends(get_catalog)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
SessionDep = Annotated[WizardSession, Depends(get_wizard_session)]


def _render(
    session: WizardSession, catalog: PaintCatalog, settings: Settings
) -> WizardSessionResponse:
    autocomplete = wizard_sessions.autocomplete_for(
        session, catalog, settings.suggestion_hide_delay
    )
    return wizard_sessions.to_response(session, autocomplete)


# ---------------------------------------------------------------------------
# Options / Reference table
# ---------------------------------------------------------------------------


@router.get("/options")
async def get_options():
    """Choices offered by steps 2 and 3, with display labels."""
    return {
        "parking_types": [{"id": p.value, "label": p.label} for p in ParkingType],
        "wash_frequencies": [
            {"id": w.value, "label": w.label} for w in WashFrequency
        ],
        "damage_types": [{"id": d.value, "label": d.label} for d in DamageType],
    }


@router.get("/vehicles/makes")
async def get_makes(catalog: CatalogDep):
    """Get all vehicle makes in the reference table."""
    return {"makes": catalog.makes()}


@router.get("/vehicles/models")
async def get_models(make: str, catalog: CatalogDep):
    """Get all models for a make."""
    return {"models": catalog.models(make)}


@router.get("/vehicles/years")
async def get_years(
    catalog: CatalogDep, make: str | None = None, model: str | None = None
):
    """Get years for a make and model, or every year when either is omitted."""
    return {"years": catalog.years(make, model)}


# ---------------------------------------------------------------------------
# Stateless analysis
# ---------------------------------------------------------------------------


@router.post("/analyze", response_model=AnalysisResult)
@limiter.limit(analysis_rate_limit)
async def analyze_form(
    request: Request,
    form: FormInput,
    catalog: CatalogDep,
    settings: SettingsDep,
):
    """Score a complete form in one call.

    Waits the configured analysis delay before answering.
    """
    await asyncio.sleep(settings.analysis_delay_seconds)
    return analyze(form, catalog)


# ---------------------------------------------------------------------------
# Wizard sessions
# ---------------------------------------------------------------------------


@router.post("/sessions", response_model=WizardSessionResponse, status_code=201)
async def create_session(
    catalog: CatalogDep,
    settings: SettingsDep,
    sessions: Annotated[SessionStore, Depends(get_sessions)],
):
    """Start a new wizard at step 1 with the full make list loaded."""
    session = sessions.create(catalog)
    return _render(session, catalog, settings)


@router.get("/sessions/{session_id}", response_model=WizardSessionResponse)
async def get_session(session: SessionDep, catalog: CatalogDep, settings: SettingsDep):
    return _render(session, catalog, settings)


@router.delete("/sessions/{session_id}", status_code=204)
async def delete_session(
    session: SessionDep,
    sessions: Annotated[SessionStore, Depends(get_sessions)],
):
    """Discard a wizard (the visitor navigated away)."""
    sessions.delete(session.session_id)
    return Response(status_code=204)


@router.post(
    "/sessions/{session_id}/fields/{field}/input",
    response_model=WizardSessionResponse,
)
async def field_input(
    field: VehicleField,
    req: FieldInputRequest,
    session: SessionDep,
    catalog: CatalogDep,
    settings: SettingsDep,
):
    """Apply a keystroke to make, model or year."""
    autocomplete = wizard_sessions.autocomplete_for(
        session, catalog, settings.suggestion_hide_delay
    )
    autocomplete.type_text(field, req.value, deleting=req.deleting)
    return wizard_sessions.to_response(session, autocomplete)


@router.post(
    "/sessions/{session_id}/fields/{field}/focus",
    response_model=WizardSessionResponse,
)
async def field_focus(
    field: VehicleField,
    session: SessionDep,
    catalog: CatalogDep,
    settings: SettingsDep,
):
    autocomplete = wizard_sessions.autocomplete_for(
        session, catalog, settings.suggestion_hide_delay
    )
    autocomplete.focus(field)
    return wizard_sessions.to_response(session, autocomplete)


@router.post(
    "/sessions/{session_id}/fields/{field}/blur",
    response_model=WizardSessionResponse,
)
async def field_blur(
    field: VehicleField,
    session: SessionDep,
    catalog: CatalogDep,
    settings: SettingsDep,
):
    autocomplete = wizard_sessions.autocomplete_for(
        session, catalog, settings.suggestion_hide_delay
    )
    autocomplete.blur(field)
    return wizard_sessions.to_response(session, autocomplete)


@router.post(
    "/sessions/{session_id}/fields/{field}/select",
    response_model=SelectSuggestionResponse,
)
async def field_select(
    field: VehicleField,
    req: SelectSuggestionRequest,
    session: SessionDep,
    catalog: CatalogDep,
    settings: SettingsDep,
):
    """Pick a suggestion; ``accepted`` is false if the list already closed."""
    autocomplete = wizard_sessions.autocomplete_for(
        session, catalog, settings.suggestion_hide_delay
    )
    accepted = autocomplete.select(field, req.value)
    rendered = wizard_sessions.to_response(session, autocomplete)
    return SelectSuggestionResponse(**rendered.model_dump(), accepted=accepted)


@router.put(
    "/sessions/{session_id}/environment", response_model=WizardSessionResponse
)
async def set_environment(
    req: EnvironmentRequest,
    session: SessionDep,
    catalog: CatalogDep,
    settings: SettingsDep,
):
    """Record parking situation and wash frequency."""
    wizard_sessions.set_environment(session, req.parking_type, req.wash_frequency)
    return _render(session, catalog, settings)


@router.post(
    "/sessions/{session_id}/damage/{damage}", response_model=WizardSessionResponse
)
async def toggle_damage(
    damage: DamageType,
    session: SessionDep,
    catalog: CatalogDep,
    settings: SettingsDep,
):
    """Add the damage flag if absent, otherwise remove it."""
    wizard_sessions.toggle_damage(session, damage)
    return _render(session, catalog, settings)


@router.post("/sessions/{session_id}/step", response_model=WizardSessionResponse)
async def change_step(
    session: SessionDep,
    catalog: CatalogDep,
    settings: SettingsDep,
    req: StepRequest | None = None,
):
    """Jump to a step, or continue to the next one when ``step`` is omitted."""
    wizard_sessions.go_to_step(session, req.step if req else None)
    return _render(session, catalog, settings)


@router.post("/sessions/{session_id}/report", response_model=AnalysisResult)
@limiter.limit(analysis_rate_limit)
async def generate_report(
    request: Request,
    session: SessionDep,
    catalog: CatalogDep,
    settings: SettingsDep,
):
    """Generate the risk report from the session's current answers."""
    return await wizard_sessions.run_report(
        session, catalog, settings.analysis_delay_seconds
    )
