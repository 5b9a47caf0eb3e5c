from typing import Optional

from pydantic import BaseModel, field_validator

from ..core.enums import DamageType, ParkingType, UrgencyLevel, WashFrequency


class FormInput(BaseModel):
    """Everything the visitor entered across the three wizard steps."""

    car_make: str = ""
    car_model: str = ""
    car_year: str = ""
    parking_type: Optional[ParkingType] = None
    wash_frequency: Optional[WashFrequency] = None
    current_damage: list[DamageType] = []

    @field_validator("current_damage")
    @classmethod
    def dedupe_damage(cls, value: list[DamageType]) -> list[DamageType]:
        """Collapse repeated flags while keeping selection order."""
        return list(dict.fromkeys(value))


class DamageProgression(BaseModel):
    six_months: float
    one_year: float
    three_years: float


class AnalysisResult(BaseModel):
    risk_score: float  # 0 - 98
    monthly_loss: float
    yearly_loss: float
    five_year_loss: float
    urgency_level: UrgencyLevel
    recommendations: list[str]
    damage_progression: DamageProgression
    specific_factors: list[str]
    additional_notes: Optional[str] = None
    vehicle_size: str
    vehicle_found: bool = False
