from typing import Optional

from pydantic import BaseModel, Field

from ..core.enums import ParkingType, VehicleField, WashFrequency, WizardStep
from ..services.suggestions import SuggestionList
from .analysis import AnalysisResult, FormInput


class WizardSession(BaseModel):
    """Server-side state of one visitor's wizard."""

    session_id: str
    step: WizardStep = WizardStep.VEHICLE
    form: FormInput = Field(default_factory=FormInput)
    suggestions: dict[VehicleField, SuggestionList] = {}
    loading: bool = False
    analysis: Optional[AnalysisResult] = None


# -----------------------------------------------------------------------------
# Request / Response Models
# -----------------------------------------------------------------------------


class FieldInputRequest(BaseModel):
    value: str = Field(default="", max_length=100)
    deleting: bool = False


class SelectSuggestionRequest(BaseModel):
    value: str = Field(..., min_length=1, max_length=100)


class EnvironmentRequest(BaseModel):
    parking_type: Optional[ParkingType] = None
    wash_frequency: Optional[WashFrequency] = None


class StepRequest(BaseModel):
    # Omitted means "Continue" to the next step
    step: Optional[WizardStep] = None


class SuggestionView(BaseModel):
    candidates: list[str]
    visible: bool


class WizardSessionResponse(BaseModel):
    session_id: str
    step: WizardStep
    form: FormInput
    suggestions: dict[VehicleField, SuggestionView]
    loading: bool
    analysis: Optional[AnalysisResult] = None


class SelectSuggestionResponse(WizardSessionResponse):
    accepted: bool
