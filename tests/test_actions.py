"""
Tests for actions and the path encoding.
"""

import pytest

from cauldron.actions import ACTIONS, Action, apply_path, parse_path, render_path
from cauldron.liquid import WATER, Ingredient, LiquidState


class TestAction:
    """Tests for the Action enum."""

    def test_canonical_order(self):
        """Ingredients first, then water, then wart."""
        assert [a.code for a in ACTIONS] == list("SGEFBCWN")
        assert len(ACTIONS) == 8

    def test_ingredient_mapping(self):
        assert Action.SPIDER_EYE.ingredient is Ingredient.SPIDER_EYE
        assert Action.DILUTE.ingredient is None
        assert Action.CATALYST.ingredient is None

    @pytest.mark.parametrize("ingredient", list(Ingredient))
    def test_add_round_trips(self, ingredient):
        assert Action.add(ingredient).ingredient is ingredient

    def test_from_code(self):
        assert Action.from_code("N") is Action.CATALYST

    def test_from_unknown_code(self):
        with pytest.raises(ValueError, match="unknown action code"):
            Action.from_code("X")

    @pytest.mark.parametrize("value", [0, 1, 1184, 18147, 32767])
    def test_apply_dispatch(self, value):
        """Each action applies the matching liquid transition."""
        state = LiquidState(value)
        for ingredient in Ingredient:
            assert Action.add(ingredient).apply(state) == state.apply_ingredient(ingredient)
        assert Action.DILUTE.apply(state) == state.dilute()
        assert Action.CATALYST.apply(state) == state.apply_catalyst()


class TestPaths:
    """Tests for rendering, parsing and applying paths."""

    def test_render(self):
        path = (Action.DILUTE, Action.SPIDER_EYE, Action.CATALYST)
        assert render_path(path) == "WEN"

    def test_render_empty(self):
        assert render_path(()) == ""

    def test_parse(self):
        assert parse_path("WEN") == (Action.DILUTE, Action.SPIDER_EYE, Action.CATALYST)

    def test_parse_invalid(self):
        with pytest.raises(ValueError):
            parse_path("WEX")

    def test_apply_path(self):
        assert apply_path(parse_path("WEFBCSN")) == LiquidState(20614)
        assert apply_path(parse_path("WEFBCSNWS")) == LiquidState(20485)

    def test_apply_empty_path(self):
        assert apply_path(()) == WATER

    def test_apply_from_state(self):
        assert apply_path(parse_path("N"), LiquidState(1184)) == LiquidState(1088)
