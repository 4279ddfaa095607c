"""
Shared base for the estimator and the planner.

Both walk the same eligible openings: deduct the frame, check eligibility,
compile the style code. Output rows are plain dicts built by the make_*
helpers so the contract lives in one place.
"""

import logging
from typing import Optional, Tuple

from ..models import Opening, Project
from ..pricing_model import DEFAULT_PRICING, PricingModel
from .dimensions import AdjustedDimensions, adjust_dimensions, skip_reason
from .style_code import ParsedStyle, parse_style_code

logger = logging.getLogger(__name__)


def format_mm(value: float) -> str:
    """Display form of a length: 1 decimal place. Never fed back into math."""
    return "%.1f mm" % value


class BaseCalculator:
    """Holds the pricing model and the per-opening preparation step."""

    def __init__(self, pricing: PricingModel = DEFAULT_PRICING):
        self.pricing = pricing

    def prepare_opening(self, project: Project,
                        opening: Opening) -> Optional[Tuple[AdjustedDimensions, ParsedStyle]]:
        """
        Returns (adjusted dimensions, parsed style) for an eligible opening,
        or None if the opening is excluded from the quote.
        """
        adjusted = adjust_dimensions(opening, project.frame_kind,
                                     self.pricing.timber_deduction_mm)
        reason = skip_reason(opening, adjusted)
        if reason is not None:
            logger.debug("Skipping opening %s × %s (%s): %s",
                         opening.width, opening.height, opening.style, reason)
            return None
        return adjusted, parse_style_code(opening.style)

    # --- Output rows ---

    def make_cut_item(self, component: str, length_mm: float, quantity: int) -> dict:
        """Build a CuttingListEntry dict."""
        return {
            "component": component,
            "length_mm": length_mm,
            "cut_length": format_mm(length_mm),
            "quantity": quantity,
        }

    def make_glass_item(self, pane_id: str, pane_kind, pane_label: str,
                        width_mm: float, height_mm: float, glazing_label: str) -> dict:
        """Build a GlassScheduleEntry dict."""
        return {
            "pane_id": pane_id,
            "pane_kind": pane_kind.value,
            "pane_label": pane_label,
            "width_mm": width_mm,
            "height_mm": height_mm,
            "pane_width": format_mm(width_mm),
            "pane_height": format_mm(height_mm),
            "glazing_label": glazing_label,
        }

    def make_cost_breakdown(self, subtotal: float, markup: float, factory: float,
                            install: float) -> dict:
        """Build a CostBreakdown dict. base and final are always derived here."""
        base = subtotal + markup + factory
        return {
            "subtotal": subtotal,
            "markup": markup,
            "factory": factory,
            "base": base,
            "install": install,
            "final": base + install,
        }
