"""
Cut dimensions and opening eligibility.

Replacing an existing timber frame loses 60 mm per axis to the reveal, so
cut sizes are the measured sizes minus the deduction. Aluminium frames are
cut to the measured size.
"""

from typing import NamedTuple, Optional

from ..models import FrameKind, Opening


class AdjustedDimensions(NamedTuple):
    cut_width: float
    cut_height: float


def adjust_dimensions(opening: Opening, frame_kind: FrameKind,
                      timber_deduction_mm: float = 60.0) -> AdjustedDimensions:
    deduction = timber_deduction_mm if frame_kind == FrameKind.EXISTING_TIMBER else 0.0
    return AdjustedDimensions(
        cut_width=opening.width - deduction,
        cut_height=opening.height - deduction,
    )


def skip_reason(opening: Opening, adjusted: AdjustedDimensions) -> Optional[str]:
    """Why an opening is left out of the quote, or None if it is eligible."""
    if opening.width <= 0 or opening.height <= 0:
        return "missing or non-positive width/height"
    if adjusted.cut_width <= 0 or adjusted.cut_height <= 0:
        return "non-positive after frame deduction"
    return None


def is_eligible(opening: Opening, adjusted: AdjustedDimensions) -> bool:
    return skip_reason(opening, adjusted) is None
