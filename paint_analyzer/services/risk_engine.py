"""Paint damage risk scoring.

Score = base risk + tabulated vehicle risk + per-flag damage risk
+ parking risk + wash risk, clamped to 0-98. Cost projections scale the
score by a size multiplier taken from the vehicle's size category.
Scoring never fails: an unknown vehicle falls back to the default size
and an explanatory factor string.
"""

import logging

from ..core.enums import (
    BASE_RISK,
    CRITICAL_RISK_THRESHOLD,
    DAMAGE_RISK_PER_FLAG,
    DEFAULT_PARKING_RISK,
    DEFAULT_SIZE_MULTIPLIER,
    DEFAULT_VEHICLE_SIZE,
    DEFAULT_WASH_RISK,
    HIGH_RISK_THRESHOLD,
    MAX_RISK_SCORE,
    MIN_RISK_SCORE,
    MONTHLY_LOSS_AT_FULL_RISK,
    PARKING_RISK,
    SIZE_MULTIPLIERS,
    WASH_RISK,
    DamageType,
    ParkingType,
    SizeCategory,
    UrgencyLevel,
    WashFrequency,
)
from ..core.logging import log_analysis
from ..models.analysis import AnalysisResult, DamageProgression, FormInput
from .paint_data import PaintCatalog

logger = logging.getLogger(__name__)

# =============================================================================
# Canned copy
# =============================================================================

PARKING_FACTORS: dict[ParkingType, str] = {
    ParkingType.STREET: "Street parking exposes your car to more environmental hazards.",
    ParkingType.UNCOVERED: "Uncovered parking increases sun and weather exposure.",
}
DEFAULT_PARKING_FACTOR = (
    "Your parking situation offers some protection from the elements."
)

WASH_FACTORS: dict[WashFrequency, str] = {
    WashFrequency.RARELY: "Infrequent washing allows contaminants to remain on the paint.",
    WashFrequency.MONTHLY: (
        "Washing your car monthly helps, but more frequent washes could be beneficial."
    ),
}
DEFAULT_WASH_FACTOR = "You have good habits of washing your car regularly."

NO_DAMAGE_FACTOR = "Your car currently has no visible paint damage."
OXIDATION_NOTE = "Oxidation can spread quickly, it's crucial to address it soon."
IMPROPER_WASHING_NOTE = (
    "The presence of both scratches and swirl marks suggest improper washing "
    "techniques may be in use."
)

GENERIC_RECOMMENDATIONS: list[str] = [
    "Professional Paint Correction",
    "Ceramic Coating Protection",
    "Regular Professional Maintenance",
]

# First entry is a template filled with the size category
SIZE_RECOMMENDATIONS: dict[SizeCategory, list[str]] = {
    SizeCategory.COMPACT: [
        "For your {size} car, consider a high-quality carnauba wax for a balance "
        "of protection and shine.",
        "Regular hand washing with pH-neutral soap to prevent swirl marks.",
        "Consider an entry-level ceramic spray for enhanced protection.",
    ],
    SizeCategory.SEDAN: [
        "To maintain the sleek look of your {size}, opt for a durable sealant or "
        "a hybrid wax.",
        "Regular polishing to remove light swirl marks and maintain gloss.",
        "A professional ceramic coating will offer superior protection and longevity.",
    ],
    SizeCategory.SUV: [
        "Given the size of your {size}, a robust ceramic coating is highly "
        "recommended for long-term protection.",
        "Consider paint protection film (PPF) for high-impact areas like the front "
        "bumper and hood.",
        "Regular professional detailing to address larger surface area and maintain "
        "finish.",
    ],
    SizeCategory.TRUCK: [
        "For maximum protection for your {size}, especially if used for work, "
        "consider a heavy-duty ceramic coating or PPF.",
        "Regular cleaning to remove mud, dirt, and road grime, which can accelerate "
        "paint damage.",
        "Professional detailing services to manage the extensive surface area and "
        "maintain paint integrity.",
    ],
    SizeCategory.LARGE_SEDAN: [
        "To preserve the luxury finish of your {size}, invest in a premium ceramic "
        "coating or high-end sealant.",
        "Gentle hand washing and drying techniques are crucial to avoid swirl marks "
        "on larger panels.",
        "Regular professional detailing to maintain the pristine condition and "
        "address any imperfections promptly.",
    ],
}

# =============================================================================
# Scoring helpers
# =============================================================================


def clamp_risk(raw: float) -> float:
    """Clamp a raw risk sum into the displayable score range."""
    return max(MIN_RISK_SCORE, min(MAX_RISK_SCORE, raw))


def size_multiplier(vehicle_size: str) -> float:
    return SIZE_MULTIPLIERS.get(vehicle_size, DEFAULT_SIZE_MULTIPLIER)


def urgency_for(score: float) -> UrgencyLevel:
    """Critical above 75, High above 50, otherwise Moderate."""
    if score > CRITICAL_RISK_THRESHOLD:
        return UrgencyLevel.CRITICAL
    if score > HIGH_RISK_THRESHOLD:
        return UrgencyLevel.HIGH
    return UrgencyLevel.MODERATE


def recommendations_for(vehicle_size: str) -> list[str]:
    size = SizeCategory.from_string(vehicle_size)
    if size is None:
        return list(GENERIC_RECOMMENDATIONS)
    return [rec.format(size=size.value) for rec in SIZE_RECOMMENDATIONS[size]]


def damage_note(damage: list[DamageType]) -> str | None:
    """Extra warning for damage combinations; oxidation always wins."""
    if DamageType.OXIDATION in damage:
        return OXIDATION_NOTE
    if DamageType.SCRATCHES in damage and DamageType.SWIRLS in damage:
        return IMPROPER_WASHING_NOTE
    return None


def project_losses(score: float, vehicle_size: str) -> tuple[float, float, float]:
    """Return (monthly, yearly, five-year) loss estimates in dollars."""
    monthly = (score / 100) * MONTHLY_LOSS_AT_FULL_RISK * size_multiplier(vehicle_size)
    yearly = monthly * 12
    five_year = yearly * 5
    return monthly, yearly, five_year


# =============================================================================
# Analysis
# =============================================================================


def analyze(form: FormInput, catalog: PaintCatalog) -> AnalysisResult:
    """Compute the full risk report for a filled-in form."""
    factors: list[str] = []
    vehicle_size = DEFAULT_VEHICLE_SIZE
    risk = BASE_RISK

    # === VEHICLE ===
    record = catalog.find(form.car_make, form.car_model, form.car_year)
    if record is not None:
        risk += record.paint_risk
        vehicle_size = record.size_category
        if record.notes:
            factors.append(record.notes)
    else:
        factors.append(
            "No specific paint risk information was found for "
            f"{form.car_make} {form.car_model} {form.car_year}."
        )

    # === DAMAGE ===
    damage = form.current_damage
    risk += len(damage) * DAMAGE_RISK_PER_FLAG

    # === PARKING ===
    risk += PARKING_RISK.get(form.parking_type, DEFAULT_PARKING_RISK)
    factors.append(PARKING_FACTORS.get(form.parking_type, DEFAULT_PARKING_FACTOR))

    # === WASHING ===
    risk += WASH_RISK.get(form.wash_frequency, DEFAULT_WASH_RISK)
    factors.append(WASH_FACTORS.get(form.wash_frequency, DEFAULT_WASH_FACTOR))

    if damage:
        factors.append(
            f"Your car shows signs of {', '.join(d.value for d in damage)}."
        )
    else:
        factors.append(NO_DAMAGE_FACTOR)

    score = clamp_risk(risk)
    monthly, yearly, five_year = project_losses(score, vehicle_size)

    log_analysis(
        form.car_make, form.car_model, form.car_year, score, found=record is not None
    )
    if record is not None and SizeCategory.from_string(vehicle_size) is None:
        logger.warning(
            "Unrecognized size category %r for %s %s %s",
            vehicle_size,
            record.make,
            record.model,
            record.year,
        )

    return AnalysisResult(
        risk_score=score,
        monthly_loss=monthly,
        yearly_loss=yearly,
        five_year_loss=five_year,
        urgency_level=urgency_for(score),
        recommendations=recommendations_for(vehicle_size),
        damage_progression=DamageProgression(
            six_months=monthly * 6,
            one_year=yearly,
            three_years=yearly * 3,
        ),
        specific_factors=factors,
        additional_notes=damage_note(damage),
        vehicle_size=vehicle_size,
        vehicle_found=record is not None,
    )
