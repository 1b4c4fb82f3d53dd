"""
Cauldron brewing - shortest ingredient sequences for every liquid state.

Models the 15-bit liquid data of a cauldron under ingredients, water and
nether wart, and searches the whole state space breadth-first.
"""

__version__ = "0.1.0"

from .config import Config
from .liquid import WATER, Ingredient, LiquidState
from .actions import ACTIONS, Action, apply_path, parse_path, render_path
from .solver import SolutionTable, Solver, run_search

__all__ = [
    "Config",
    "WATER",
    "Ingredient",
    "LiquidState",
    "ACTIONS",
    "Action",
    "apply_path",
    "parse_path",
    "render_path",
    "SolutionTable",
    "Solver",
    "run_search",
    "__version__",
]
