"""
Bit helpers shared by the liquid state and the fungal automaton.

Liquid data is a 15-bit value; bit 0 is the least significant bit.
"""

# Liquid data width
STATE_BITS = 15
STATE_COUNT = 1 << STATE_BITS
STATE_MASK = STATE_COUNT - 1


def highest_set_bit(value: int) -> int:
    """
    Position of the most significant set bit.

    Args:
        value: Non-negative integer

    Returns:
        Bit position, or -1 if no bit is set
    """
    return value.bit_length() - 1


def lowest_set_bit(value: int) -> int:
    """
    Position of the least significant set bit.

    Args:
        value: Non-negative integer

    Returns:
        Bit position, or -1 if no bit is set
    """
    return (value & -value).bit_length() - 1


def wrap_index(index: int, size: int = STATE_BITS) -> int:
    """Map any index (negative included) onto [0, size)."""
    # Python's % already follows the sign of the divisor
    return index % size


def bit_positions(value: int) -> list[int]:
    """Set bit positions of value in ascending order."""
    return [i for i in range(value.bit_length()) if value >> i & 1]
