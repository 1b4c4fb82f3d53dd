"""
Liquid data of a cauldron and the transitions acting on it.

The liquid data is a 15-bit value, each bit a property of the brew. Three
kinds of transition change it:
- adding an ingredient ORs in a fixed set of bits
- diluting (adding water) clears the odd bits 1..13
- adding the catalyst (nether wart) runs a carry/shift step followed by
  the fungal automaton until it settles
"""

from dataclasses import dataclass
from enum import Enum

from .bitmath import STATE_COUNT, STATE_MASK, bit_positions, highest_set_bit
from .fungal import FungalAutomaton


class Ingredient(Enum):
    """The six basic potion ingredients."""

    SUGAR = "sugar"
    GHAST_TEAR = "ghast_tear"
    SPIDER_EYE = "spider_eye"
    FERMENTED_SPIDER_EYE = "fermented_spider_eye"
    BLAZE_POWDER = "blaze_powder"
    MAGMA_CREAM = "magma_cream"

    @property
    def added_bits(self) -> tuple[int, ...]:
        """Bit positions set by this ingredient."""
        return INGREDIENT_BITS[self]

    @property
    def mask(self) -> int:
        """Added bits as a single integer mask."""
        result = 0
        for bit in self.added_bits:
            result |= 1 << bit
        return result


INGREDIENT_BITS: dict[Ingredient, tuple[int, ...]] = {
    Ingredient.SUGAR: (0,),
    Ingredient.GHAST_TEAR: (11,),
    Ingredient.SPIDER_EYE: (5, 7, 10),
    Ingredient.FERMENTED_SPIDER_EYE: (9, 14),
    Ingredient.BLAZE_POWDER: (14,),
    Ingredient.MAGMA_CREAM: (1, 6, 14),
}

# Bits cleared by water
DILUTE_BITS = (1, 3, 5, 7, 9, 11, 13)
DILUTE_MASK = sum(1 << bit for bit in DILUTE_BITS)


@dataclass(frozen=True)
class LiquidState:
    """
    Liquid data of a cauldron, or the damage value of a potion item.

    Attributes:
        value: 15-bit integer in [0, 32767]
    """

    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value < STATE_COUNT:
            raise ValueError(f"value must be in [0, {STATE_COUNT - 1}], got {self.value}")

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    @property
    def bits(self) -> list[int]:
        """Set bit positions, lowest first."""
        return bit_positions(self.value)

    def has_bit(self, position: int) -> bool:
        """Whether bit `position` is set."""
        return bool(self.value >> position & 1)

    def apply_ingredient(self, ingredient: Ingredient) -> "LiquidState":
        """
        Calculate the result of adding an ingredient.

        Only sets bits, so adding the same ingredient twice changes nothing.
        """
        return LiquidState((self.value | ingredient.mask) & STATE_MASK)

    def dilute(self) -> "LiquidState":
        """
        Calculate the result of adding a water bucket.

        In-game a layer has to be removed with an empty bottle first.
        """
        return LiquidState(self.value & ~DILUTE_MASK)

    def apply_catalyst(self) -> "LiquidState":
        """Calculate the result of adding a nether wart."""
        return self.catalyst_stage_one().catalyst_stage_two()

    def catalyst_stage_one(self) -> "LiquidState":
        """
        Carry/shift step of the catalyst.

        Requires bit 0 set and a '10' pattern at the top of the value.
        When both hold, the top bit is cleared, everything is shifted left
        by one, and bits top-1 and top are set.
        e.g. 0b101_0001 -> 0b110_0010
        """
        value = self.value
        if not value & 1:
            return self

        top = highest_set_bit(value)
        if top < 2 or value >> (top - 1) & 1:
            return self

        result = value & ~(1 << top)
        result <<= 1
        result |= 0b11 << (top - 1)
        return LiquidState(result & STATE_MASK)

    def catalyst_stage_two(self) -> "LiquidState":
        """
        Run the fungal automaton over everything below the top bit.

        The top set bit is lifted out, the remaining pattern is evolved to
        its fixed point, and the top bit is put back.
        """
        value = self.value
        top = highest_set_bit(value)
        residual = value & ~(1 << top) if top >= 0 else value

        fixed_point, _ = FungalAutomaton.from_int(residual).converge()

        result = int(fixed_point)
        if top >= 0:
            result |= 1 << top
        return LiquidState(result & STATE_MASK)

    def __repr__(self) -> str:
        return f"LiquidState({self.value:05d})"


# Plain water
WATER = LiquidState(0)
