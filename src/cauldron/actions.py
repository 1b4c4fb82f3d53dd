"""
The eight actions that can be taken on a cauldron.

Six add an ingredient, one dilutes with water and one adds the nether wart
catalyst. Definition order is the canonical order, used both to break ties
in the search and for the single-character path encoding.
"""

from enum import Enum
from typing import Iterable, Optional

from .liquid import WATER, Ingredient, LiquidState


class Action(Enum):
    """An action, valued by its single-character code."""

    SUGAR = "S"
    GHAST_TEAR = "G"
    SPIDER_EYE = "E"
    FERMENTED_SPIDER_EYE = "F"
    BLAZE_POWDER = "B"
    MAGMA_CREAM = "C"
    DILUTE = "W"
    CATALYST = "N"

    @property
    def code(self) -> str:
        return self.value

    @property
    def ingredient(self) -> Optional[Ingredient]:
        """Ingredient added by this action, or None for water and wart."""
        return _INGREDIENT_OF.get(self)

    @classmethod
    def from_code(cls, code: str) -> "Action":
        try:
            return cls(code)
        except ValueError:
            raise ValueError(f"unknown action code {code!r}") from None

    @classmethod
    def add(cls, ingredient: Ingredient) -> "Action":
        """The action adding `ingredient`."""
        return _ACTION_OF[ingredient]

    def apply(self, state: LiquidState) -> LiquidState:
        """Transform a liquid state by this action."""
        if self is Action.DILUTE:
            return state.dilute()
        if self is Action.CATALYST:
            return state.apply_catalyst()
        return state.apply_ingredient(_INGREDIENT_OF[self])


_INGREDIENT_OF: dict[Action, Ingredient] = {
    Action.SUGAR: Ingredient.SUGAR,
    Action.GHAST_TEAR: Ingredient.GHAST_TEAR,
    Action.SPIDER_EYE: Ingredient.SPIDER_EYE,
    Action.FERMENTED_SPIDER_EYE: Ingredient.FERMENTED_SPIDER_EYE,
    Action.BLAZE_POWDER: Ingredient.BLAZE_POWDER,
    Action.MAGMA_CREAM: Ingredient.MAGMA_CREAM,
}
_ACTION_OF: dict[Ingredient, Action] = {v: k for k, v in _INGREDIENT_OF.items()}

# Canonical order
ACTIONS: tuple[Action, ...] = tuple(Action)


def render_path(path: Iterable[Action]) -> str:
    """Render actions as a string of codes, e.g. 'WEN'."""
    return "".join(action.code for action in path)


def parse_path(text: str) -> tuple[Action, ...]:
    """
    Parse a code string back into actions.

    Raises:
        ValueError: On an unknown code
    """
    return tuple(Action.from_code(ch) for ch in text)


def apply_path(path: Iterable[Action], state: LiquidState = WATER) -> LiquidState:
    """Apply a sequence of actions to `state`, in order."""
    for action in path:
        state = action.apply(state)
    return state
