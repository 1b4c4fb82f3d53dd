"""
Configuration dataclass for a cauldron search run.
"""

from dataclasses import dataclass, asdict
from typing import Any

from .actions import ACTIONS

DEFAULT_UNREACHED_MARKER = "------"

_ACTION_CODES = frozenset(action.code for action in ACTIONS)


def validate_unreached_marker(marker: str) -> None:
    """
    Check that a marker cannot be mistaken for a path in the results file.

    Raises:
        ValueError: If the marker is empty, padded with whitespace, contains
            a comma or newline, or consists only of action codes
    """
    if not marker or not marker.strip():
        raise ValueError("unreached_marker must not be empty or blank")

    if marker.strip() != marker:
        raise ValueError(
            f"unreached_marker must not have leading or trailing whitespace, got {marker!r}"
        )

    if any(ch in marker for ch in ",\n\r"):
        raise ValueError(
            f"unreached_marker must not contain a comma or newline, got {marker!r}"
        )

    if set(marker) <= _ACTION_CODES:
        raise ValueError(
            f"unreached_marker must not consist only of action codes, got {marker!r}"
        )


@dataclass
class Config:
    """
    Configuration for a search run and its results file.

    Attributes:
        output_path: Where the results file is written
        include_unreached: Also write a line for states no path reaches
        unreached_marker: Text written in place of a path for unreached states
        show_progress: Show a progress bar while searching
    """

    output_path: str = "results.txt"
    include_unreached: bool = False
    unreached_marker: str = DEFAULT_UNREACHED_MARKER
    show_progress: bool = True

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        self._validate()

    def _validate(self) -> None:
        if not self.output_path:
            raise ValueError("output_path must not be empty")

        validate_unreached_marker(self.unreached_marker)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        return cls(**d)

    @classmethod
    def from_args(cls, args: Any) -> "Config":
        """Create config from argparse namespace."""
        # Extract only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        config_dict = {k: v for k, v in vars(args).items() if k in known_fields and v is not None}
        return cls(**config_dict)
