# blog_api/services/likes/dto.py
from __future__ import annotations

import enum
from dataclasses import dataclass

from blog_api.models.like import LikeableType


class Reaction(str, enum.Enum):
    """A reader's reaction; the value names the counter it increments."""

    LIKE = "likes"
    DISLIKE = "dislikes"

    @classmethod
    def parse(cls, raw: str) -> Reaction:
        """Accept ``like``/``dislike`` (or their plural counter names)."""
        value = str(raw).strip().lower()
        for member in cls:
            if value in (member.name.lower(), member.value):
                return member
        raise ValueError(f"Unknown reaction: {raw!r}")


@dataclass(frozen=True, slots=True)
class LikeableRef:
    """Polymorphic pointer to a likeable row."""

    likeable_type: LikeableType
    likeable_id: int


@dataclass(frozen=True, slots=True)
class ReactIn:
    target: LikeableRef
    reaction: Reaction


@dataclass(frozen=True, slots=True)
class LikeCountsOut:
    likeable_type: str
    likeable_id: int
    likes: int
    dislikes: int
