"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum, IntEnum
from typing import Optional

from pydantic import field_validator

from forum.domain.value.common import RootValueObject


class Voice(IntEnum):
    """Strength of a thread vote."""

    UP = 1
    DOWN = -1


class PostSort(str, Enum):
    """Traversal mode for listing the posts of a thread."""

    FLAT = "flat"  # By id
    TREE = "tree"  # Depth-first by materialized path
    PARENT_TREE = "parent_tree"  # Whole root subtrees, paginated by root

    @classmethod
    def parse(cls, value: Optional[str]) -> "PostSort":
        """Parse a sort tag, falling back to flat for missing or unknown tags."""
        if value is None:
            return cls.FLAT
        try:
            return cls(value)
        except ValueError:
            return cls.FLAT


class Nickname(RootValueObject[str]):
    """User nickname.

    Letters, digits, underscores and dots. Lookups are case-insensitive.
    Examples: 'j.sparrow', 'captain_jack'
    """

    @field_validator("root")
    @classmethod
    def validate_nickname(cls, v: str) -> str:
        """Validate nickname format."""
        if not re.match(r"^[\w.]{1,255}$", v):
            raise ValueError(
                "Nickname must be 1-255 characters of letters, digits, '_' or '.'"
            )
        return v

    @property
    def key(self) -> str:
        """Case-folded form used for comparisons."""
        return self.root.lower()


class Slug(RootValueObject[str]):
    """Human-readable identifier for forums and threads.

    Must not be purely numeric, so a thread reference can be told apart
    from a thread id.
    Examples: 'pirate-stories', 'jones_locker'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[\w-]{1,255}$", v):
            raise ValueError(
                "Slug must be 1-255 characters of letters, digits, '-' or '_'"
            )
        if re.match(r"^-?\d+$", v):
            raise ValueError("Slug must not be numeric")
        return v

    @property
    def key(self) -> str:
        """Case-folded form used for comparisons."""
        return self.root.lower()
