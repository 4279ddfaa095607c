"""
Pricing model: the rate table every calculation reads from.

Rates are derived from supplier invoices: each per-mm rate is an invoice
line price divided by the extrusion length it bought.
Built once at startup and never mutated: the model is frozen and its
lookup tables are read-only mappings.
"""

import types
from typing import Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from .models import GlazingType, PaneKind

# --- Default rates ---
# Extrusions: currency per mm
HEAD_RATE_PER_MM = 5.63 / 506
SILL_RATE_PER_MM = 6.69 / 506
JAMB_RATE_PER_MM = 31.47 / (2 * 1781)
MULLION_RATE_PER_MM = 31.47 / (2 * 1781)  # Same section as the jambs

# Glass: currency per mm², 6mm laminated sheet 1675.1 × 428
GLASS_RATE_PER_SQ_MM = 32.26 / (1675.1 * 428)

# Powder coat: head + sill + 2 jambs invoiced together
POWDER_COAT_RATE_PER_MM = (2.17 + 2.17 + 15.27) / (506 + 506 + (2 * 1781))

# Per-pane hardware (sash, stays, handles, seals)
FIXED_COST_BY_PANE_KIND = {
    PaneKind.AWNING.value: 80.83 + 1.94 + (0.53 + 1.84) + (0.39 + 1.36),
    PaneKind.SLIDING.value: 70.00,
    PaneKind.FIXED.value: 5.00,
}

GLAZING_MULTIPLIERS = {
    GlazingType.SINGLE_GLAZED.value: 1.0,
    GlazingType.TOUGHENED.value: 1.4,
    GlazingType.DOUBLE_GLAZED.value: 1.8,
    GlazingType.ACOUSTIC.value: 2.2,
}

# Total-over-materials ratio, not a percentage on top
WASTE_AND_PROFIT_MARKUP = 436.568 / 208.79
FACTORY_BUILD_COST_PER_WINDOW = 750.00
INSTALLATION_COST_PER_WINDOW = 800.00
TIMBER_FRAME_DEDUCTION_MM = 60.0


class PricingModel(BaseModel):
    # Defaults go through _read_only too, so DEFAULT_PRICING gets read-only tables
    model_config = ConfigDict(frozen=True, validate_default=True)

    head_rate_per_mm: float = HEAD_RATE_PER_MM
    sill_rate_per_mm: float = SILL_RATE_PER_MM
    jamb_rate_per_mm: float = JAMB_RATE_PER_MM
    mullion_rate_per_mm: float = MULLION_RATE_PER_MM
    glass_rate_per_sq_mm: float = GLASS_RATE_PER_SQ_MM
    powder_coat_rate_per_mm: float = POWDER_COAT_RATE_PER_MM
    glazing_multipliers: Mapping[str, float] = GLAZING_MULTIPLIERS
    fixed_cost_by_pane_kind: Mapping[str, float] = FIXED_COST_BY_PANE_KIND
    markup_ratio: float = WASTE_AND_PROFIT_MARKUP
    factory_cost_per_opening: float = FACTORY_BUILD_COST_PER_WINDOW
    install_cost_per_opening: float = INSTALLATION_COST_PER_WINDOW
    timber_deduction_mm: float = TIMBER_FRAME_DEDUCTION_MM

    @field_validator("glazing_multipliers", "fixed_cost_by_pane_kind")
    @classmethod
    def _read_only(cls, value):
        return types.MappingProxyType(dict(value))

    @classmethod
    def from_settings(cls, settings) -> "PricingModel":
        """Default rates with the per-window and markup figures taken from Settings."""
        return cls(
            markup_ratio=settings.MARKUP_RATIO,
            factory_cost_per_opening=settings.FACTORY_COST_PER_WINDOW,
            install_cost_per_opening=settings.INSTALL_COST_PER_WINDOW,
            timber_deduction_mm=settings.TIMBER_DEDUCTION_MM,
        )

    def glazing_multiplier(self, glazing_type) -> float:
        """Glass cost scalar. Unrecognized glazing → 1.0."""
        key = glazing_type.value if isinstance(glazing_type, GlazingType) else glazing_type
        if key in self.glazing_multipliers:
            return self.glazing_multipliers[key]
        return 1.0

    def fixed_cost(self, pane_kind: PaneKind) -> float:
        """Per-pane hardware cost. Unknown panes carry none."""
        if pane_kind == PaneKind.UNKNOWN:
            return 0.0
        return self.fixed_cost_by_pane_kind.get(pane_kind.value, 0.0)


DEFAULT_PRICING = PricingModel()
