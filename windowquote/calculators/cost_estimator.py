"""
Cost estimator: Project → CostBreakdown.

Material cost per eligible opening, then markup, factory build and optional
installation over the whole project. Full precision throughout; rounding to
cents is the caller's job.
"""

import logging

from ..models import Project
from .base import BaseCalculator
from .dimensions import AdjustedDimensions
from .style_code import ParsedStyle

logger = logging.getLogger(__name__)


class CostEstimator(BaseCalculator):

    def estimate(self, project: Project) -> dict:
        """
        Price a whole project.

        Returns:
            CostBreakdown dict:
            {
                subtotal: float,   # materials, all eligible openings
                markup: float,     # subtotal × (markup_ratio − 1)
                factory: float,    # eligible openings × factory build cost
                base: float,       # subtotal + markup + factory
                install: float,    # eligible openings × install cost, if requested
                final: float,      # base + install
            }
        """
        if not project.rooms:
            return self.make_cost_breakdown(0.0, 0.0, 0.0, 0.0)

        subtotal = 0.0
        eligible_count = 0
        for _room, _number, opening in project.iter_openings():
            prepared = self.prepare_opening(project, opening)
            if prepared is None:
                continue
            adjusted, parsed = prepared
            subtotal += self.opening_cost(adjusted, parsed, project.glazing_type)
            eligible_count += 1

        # markup_ratio is the total over materials, so only the excess is markup
        markup = subtotal * (self.pricing.markup_ratio - 1)
        factory = eligible_count * self.pricing.factory_cost_per_opening
        install = (eligible_count * self.pricing.install_cost_per_opening
                   if project.installation_requested else 0.0)

        logger.info("Estimated %d eligible opening(s), subtotal %.2f",
                    eligible_count, subtotal)
        return self.make_cost_breakdown(subtotal, markup, factory, install)

    def opening_cost(self, adjusted: AdjustedDimensions, parsed: ParsedStyle,
                     glazing_type) -> float:
        """Material cost of one eligible opening: frame, transoms, mullions, glass, hardware, powder coat."""
        p = self.pricing
        width = adjusted.cut_width
        height = adjusted.cut_height
        num_rows = parsed.num_rows
        row_height = height / num_rows
        multiplier = p.glazing_multiplier(glazing_type)

        # 1. Frame: head, sill, two jambs
        cost = width * (p.head_rate_per_mm + p.sill_rate_per_mm) + 2 * height * p.jamb_rate_per_mm

        # 2. Transoms: one per internal row boundary
        if num_rows > 1:
            cost += (num_rows - 1) * width * p.mullion_rate_per_mm

        vertical_mullion_length = 0.0
        for row in parsed.rows:
            pane_count = len(row)

            # 3. Mullions between panes in the row
            if pane_count > 1:
                mullion_length = (pane_count - 1) * row_height
                cost += mullion_length * p.mullion_rate_per_mm
                vertical_mullion_length += mullion_length

            # 4. Glass + per-pane hardware
            pane_area = row_height * (width / pane_count)
            for pane_kind in row:
                cost += pane_area * p.glass_rate_per_sq_mm * multiplier
                cost += p.fixed_cost(pane_kind)  # UNKNOWN carries none

        # 5. Powder coat over every extrusion
        extrusion_length = (2 * width + 2 * height
                            + (num_rows - 1) * width + vertical_mullion_length)
        cost += extrusion_length * p.powder_coat_rate_per_mm

        return cost
