from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class PaintRecord(BaseModel):
    """One row of the static paint reference table.

    The bundled JSON uses camelCase keys (``paintRisk``, ``sizeCategory``,
    ``desiredLook``); snake_case keys are accepted as well.
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    make: str
    model: str
    year: str
    paint_risk: float = Field(
        validation_alias=AliasChoices("paintRisk", "paint_risk")
    )
    notes: Optional[str] = None
    size_category: str = Field(
        validation_alias=AliasChoices("sizeCategory", "size_category")
    )
    desired_look: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("desiredLook", "desired_look")
    )


class PaintDataset(BaseModel):
    """Top-level shape of the paint data JSON file."""

    paints: list[PaintRecord] = []
