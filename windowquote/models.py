"""
Project model: the typed form of a quote request body.

The wire shape is camelCase and loose (see Project.from_body). Loading never
fails on bad per-window data: unusable dimensions become 0.0 and the opening
is later excluded by the eligibility check.
"""

import enum
import math
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


# --- Enums ---

class FrameKind(str, enum.Enum):
    EXISTING_TIMBER = "existing_timber"
    EXISTING_ALUMINIUM = "existing_aluminium"


class GlazingType(str, enum.Enum):
    SINGLE_GLAZED = "single_glazed"
    TOUGHENED = "toughened"
    DOUBLE_GLAZED = "double_glazed"
    ACOUSTIC = "acoustic"


class PaneKind(str, enum.Enum):
    AWNING = "awning"
    FIXED = "fixed"
    SLIDING = "sliding"
    UNKNOWN = "unknown"


def coerce_dimension(value: Any) -> float:
    """Parse a width/height in mm. Anything unusable becomes 0.0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(str(value).strip())
    except (ValueError, TypeError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def _text_or_none(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


class Opening(BaseModel):
    model_config = ConfigDict(frozen=True)

    style: str = ""
    width: float = 0.0
    height: float = 0.0

    @field_validator("style", mode="before")
    @classmethod
    def _style_as_text(cls, value):
        return "" if value is None else str(value)

    @field_validator("width", "height", mode="before")
    @classmethod
    def _lenient_dimension(cls, value):
        return coerce_dimension(value)


class Room(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    windows: List[Opening] = []

    @field_validator("name", mode="before")
    @classmethod
    def _name_as_text(cls, value):
        return "" if value is None else str(value)

    @field_validator("windows", mode="before")
    @classmethod
    def _windows_or_empty(cls, value):
        return value or []


class Project(BaseModel):
    model_config = ConfigDict(frozen=True)

    frame_kind: FrameKind = FrameKind.EXISTING_ALUMINIUM
    glazing_type: str = GlazingType.SINGLE_GLAZED.value
    installation_requested: bool = False
    frame_color: Optional[str] = None
    quote_name: Optional[str] = None
    rooms: List[Room] = []

    @field_validator("rooms", mode="before")
    @classmethod
    def _rooms_or_empty(cls, value):
        return value or []

    @classmethod
    def from_body(cls, body: dict) -> "Project":
        """
        Build a Project from the request body.

        existingFrame: "timber" → existing timber, anything else → aluminium
        installationCosts: "yes" → installation requested, anything else → no
        glazingType: kept verbatim: unknown values price at multiplier 1.0
        """
        glazing = body.get("glazingType")
        return cls(
            frame_kind=(FrameKind.EXISTING_TIMBER if body.get("existingFrame") == "timber"
                        else FrameKind.EXISTING_ALUMINIUM),
            glazing_type="" if glazing is None else str(glazing),
            installation_requested=body.get("installationCosts") == "yes",
            frame_color=_text_or_none(body.get("frameColor")),
            quote_name=_text_or_none(body.get("quoteName")),
            rooms=body.get("rooms") or [],
        )

    def iter_openings(self):
        """Yield (room, window_number, opening) in project order. window_number is 1-based."""
        for room in self.rooms:
            for idx, opening in enumerate(room.windows):
                yield room, idx + 1, opening
