"""
Production planner: cutting list and glass schedule per opening.

Lengths and pane sizes are kept precise (length_mm, width_mm, height_mm)
next to their 1-decimal display strings; only the display strings are
rounded.
"""

from ..labels import glazing_label, pane_label
from ..models import Opening, Project
from .base import BaseCalculator
from .dimensions import AdjustedDimensions
from .style_code import ParsedStyle


class ProductionPlanner(BaseCalculator):

    def plan(self, opening: Opening, adjusted: AdjustedDimensions,
             parsed: ParsedStyle, glazing_type) -> tuple:
        """Returns (cutting_list, glass_schedule) for one eligible opening."""
        return (
            self.cutting_list(adjusted, parsed),
            self.glass_schedule(adjusted, parsed, glazing_type),
        )

    def cutting_list(self, adjusted: AdjustedDimensions, parsed: ParsedStyle) -> list:
        num_rows = parsed.num_rows
        items = [
            self.make_cut_item("head-sill", adjusted.cut_width, 2),
            self.make_cut_item("jambs", adjusted.cut_height, 2),
        ]
        if num_rows > 1:
            items.append(self.make_cut_item("transom", adjusted.cut_width, num_rows - 1))

        row_height = adjusted.cut_height / num_rows
        for r_idx, pane_count in enumerate(parsed.pane_counts):
            if pane_count > 1:
                items.append(self.make_cut_item(
                    "mullion-row-%d" % (r_idx + 1), row_height, pane_count - 1,
                ))
        return items

    def glass_schedule(self, adjusted: AdjustedDimensions, parsed: ParsedStyle,
                       glazing_type) -> list:
        label = glazing_label(glazing_type)
        pane_height = adjusted.cut_height / parsed.num_rows
        items = []
        for r_idx, row in enumerate(parsed.rows):
            pane_width = adjusted.cut_width / len(row)
            for p_idx, pane_kind in enumerate(row):
                items.append(self.make_glass_item(
                    pane_id="%d-%d" % (r_idx + 1, p_idx + 1),
                    pane_kind=pane_kind,
                    pane_label=pane_label(pane_kind),
                    width_mm=pane_width,
                    height_mm=pane_height,
                    glazing_label=label,
                ))
        return items

    def plan_project(self, project: Project) -> list:
        """
        Production work order: one entry per eligible opening, in project order.

        window_number is the opening's 1-based position in its room as entered,
        so skipped openings leave a gap rather than renumbering the rest.
        """
        work_order = []
        for room, number, opening in project.iter_openings():
            prepared = self.prepare_opening(project, opening)
            if prepared is None:
                continue
            adjusted, parsed = prepared
            cutting_list, glass_schedule = self.plan(opening, adjusted, parsed,
                                                     project.glazing_type)
            work_order.append({
                "room": room.name,
                "window_number": number,
                "style": parsed.code,
                "width_mm": opening.width,
                "height_mm": opening.height,
                "cut_width_mm": adjusted.cut_width,
                "cut_height_mm": adjusted.cut_height,
                "cutting_list": cutting_list,
                "glass_schedule": glass_schedule,
            })
        return work_order
