"""
Pricing model tests.

Tests:
1-3.  Default rates (invoice-derived values)
4-6.  Lookups with defaults (glazing, pane hardware)
7-10. Immutability + settings defaults and overrides
"""

import pytest
from pydantic import ValidationError

from windowquote.config import Settings
from windowquote.models import GlazingType, PaneKind
from windowquote.pricing_model import PricingModel, DEFAULT_PRICING


# ============================================================
# 1-3. Default rates
# ============================================================

def test_default_extrusion_rates():
    p = PricingModel()
    assert p.head_rate_per_mm == pytest.approx(0.011126, abs=1e-6)
    assert p.sill_rate_per_mm == pytest.approx(0.013221, abs=1e-6)
    assert p.jamb_rate_per_mm == pytest.approx(0.008835, abs=1e-6)
    assert p.mullion_rate_per_mm == p.jamb_rate_per_mm


def test_default_glass_and_powder_rates():
    p = PricingModel()
    assert p.glass_rate_per_sq_mm == pytest.approx(0.000045, abs=1e-7)
    assert p.powder_coat_rate_per_mm == pytest.approx(0.0042872, abs=1e-6)


def test_default_per_window_figures():
    p = PricingModel()
    assert p.markup_ratio == pytest.approx(2.0909, abs=1e-4)
    assert p.factory_cost_per_opening == 750
    assert p.install_cost_per_opening == 800
    assert p.timber_deduction_mm == 60


# ============================================================
# 4-6. Lookups
# ============================================================

def test_glazing_multipliers():
    p = PricingModel()
    assert p.glazing_multiplier("single_glazed") == 1.0
    assert p.glazing_multiplier("toughened") == 1.4
    assert p.glazing_multiplier("double_glazed") == 1.8
    assert p.glazing_multiplier(GlazingType.ACOUSTIC) == 2.2


def test_unknown_glazing_multiplier_is_one():
    p = PricingModel()
    assert p.glazing_multiplier("triple_glazed") == 1.0
    assert p.glazing_multiplier("") == 1.0


def test_fixed_costs_by_pane_kind():
    p = PricingModel()
    assert p.fixed_cost(PaneKind.AWNING) == pytest.approx(86.89)
    assert p.fixed_cost(PaneKind.SLIDING) == 70.00
    assert p.fixed_cost(PaneKind.FIXED) == 5.00
    assert p.fixed_cost(PaneKind.UNKNOWN) == 0.0


# ============================================================
# 7-10. Immutability + settings
# ============================================================

def test_pricing_model_is_frozen():
    with pytest.raises(ValidationError):
        DEFAULT_PRICING.markup_ratio = 3.0
    assert DEFAULT_PRICING.markup_ratio == pytest.approx(2.0909, abs=1e-4)
    with pytest.raises(TypeError):
        DEFAULT_PRICING.glazing_multipliers["single_glazed"] = 9.0
    with pytest.raises(TypeError):
        DEFAULT_PRICING.fixed_cost_by_pane_kind["fixed"] = 0.0
    assert DEFAULT_PRICING.glazing_multiplier("single_glazed") == 1.0
    assert DEFAULT_PRICING.fixed_cost(PaneKind.FIXED) == 5.00


def test_custom_tables_are_copied_and_read_only():
    table = {"single_glazed": 1.0}
    p = PricingModel(glazing_multipliers=table)
    table["single_glazed"] = 9.0
    assert p.glazing_multiplier("single_glazed") == 1.0
    with pytest.raises(TypeError):
        p.glazing_multipliers["toughened"] = 1.4


def test_settings_defaults_match_pricing_defaults():
    assert PricingModel.from_settings(Settings()) == DEFAULT_PRICING


def test_from_settings_overrides_per_window_figures():
    s = Settings(MARKUP_RATIO=1.5, FACTORY_COST_PER_WINDOW=600.0,
                 INSTALL_COST_PER_WINDOW=900.0, TIMBER_DEDUCTION_MM=50.0)
    p = PricingModel.from_settings(s)
    assert p.markup_ratio == 1.5
    assert p.factory_cost_per_opening == 600.0
    assert p.install_cost_per_opening == 900.0
    assert p.timber_deduction_mm == 50.0
    # Rates per mm keep their defaults
    assert p.head_rate_per_mm == DEFAULT_PRICING.head_rate_per_mm
