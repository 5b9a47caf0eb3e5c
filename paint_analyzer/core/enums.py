"""Enums and scoring constants for the paint risk wizard."""

from enum import Enum, IntEnum


class ParkingType(str, Enum):
    """Where the vehicle is usually parked."""

    GARAGE = "garage"
    COVERED = "covered"
    UNCOVERED = "uncovered"
    STREET = "street"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class WashFrequency(str, Enum):
    """How often the owner washes the vehicle."""

    RARELY = "rarely"
    MONTHLY = "monthly"
    WEEKLY = "weekly"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class DamageType(str, Enum):
    """Visible paint damage the owner can report."""

    SWIRLS = "swirls"
    SCRATCHES = "scratches"
    WATER_SPOTS = "waterSpots"
    OXIDATION = "oxidation"

    @property
    def label(self) -> str:
        return DAMAGE_LABELS[self]


DAMAGE_LABELS: dict[DamageType, str] = {
    DamageType.SWIRLS: "Swirl Marks",
    DamageType.SCRATCHES: "Light Scratches",
    DamageType.WATER_SPOTS: "Water Spots",
    DamageType.OXIDATION: "Paint Oxidation",
}


class SizeCategory(str, Enum):
    """Vehicle size classes used for cost multipliers and recommendations."""

    COMPACT = "Compact"
    SEDAN = "Sedan"
    SUV = "SUV"
    TRUCK = "Truck"
    LARGE_SEDAN = "Large Sedan"

    @classmethod
    def from_string(cls, value: str | None) -> "SizeCategory | None":
        """Convert string to enum, returning None if unrecognized."""
        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class UrgencyLevel(str, Enum):
    """Tiered label derived from the risk score."""

    MODERATE = "Moderate"
    HIGH = "High"
    CRITICAL = "Critical"


class VehicleField(str, Enum):
    """The three cascading vehicle inputs, in dependency order."""

    MAKE = "make"
    MODEL = "model"
    YEAR = "year"

    @property
    def dependents(self) -> list["VehicleField"]:
        """Fields that are cleared when this one changes."""
        order = list(VehicleField)
        return order[order.index(self) + 1 :]


class WizardStep(IntEnum):
    """Form steps shown before the report."""

    VEHICLE = 1
    ENVIRONMENT = 2
    CONDITION = 3


# Risk score weights
BASE_RISK = 30
DAMAGE_RISK_PER_FLAG = 5
MAX_RISK_SCORE = 98
MIN_RISK_SCORE = 0

PARKING_RISK: dict[ParkingType, int] = {
    ParkingType.STREET: 20,
    ParkingType.UNCOVERED: 15,
}
DEFAULT_PARKING_RISK = 5

WASH_RISK: dict[WashFrequency, int] = {
    WashFrequency.RARELY: 15,
    WashFrequency.MONTHLY: 10,
}
DEFAULT_WASH_RISK = 5

# Urgency thresholds (strictly greater than)
CRITICAL_RISK_THRESHOLD = 75
HIGH_RISK_THRESHOLD = 50

# Cost model
MONTHLY_LOSS_AT_FULL_RISK = 100
SIZE_MULTIPLIERS: dict[str, float] = {
    SizeCategory.COMPACT.value: 0.8,
    SizeCategory.SEDAN.value: 1.0,
    SizeCategory.SUV.value: 1.2,
    SizeCategory.TRUCK.value: 1.5,
    SizeCategory.LARGE_SEDAN.value: 1.1,
}
DEFAULT_SIZE_MULTIPLIER = 1.0
DEFAULT_VEHICLE_SIZE = SizeCategory.SEDAN.value
