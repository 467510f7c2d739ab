"""Repository for polymorphic like/dislike counters."""

from __future__ import annotations

from collections.abc import Iterable
from typing import cast

from sqlalchemy import delete, select, update

from blog_api.models.like import Like, LikeableType
from blog_api.repositories.base import BaseRepository

COUNTERS = ("likes", "dislikes")


class LikeRepository(BaseRepository[Like]):
    """Counter rows keyed by ``(likeable_type, likeable_id)``."""

    model = Like

    def get_for(self, likeable_type: LikeableType, likeable_id: int) -> Like | None:
        stmt = select(Like).where(
            Like.likeable_type == likeable_type.value,
            Like.likeable_id == likeable_id,
        )
        return cast(Like | None, self.session.execute(stmt).scalars().first())

    def increment(self, likeable_type: LikeableType, likeable_id: int, counter: str) -> int:
        """Atomically add one to ``counter``; returns the number of rows touched.

        The increment is computed by the database (``SET likes = likes + 1``) so
        concurrent reactions never lose updates.
        """
        if counter not in COUNTERS:
            raise ValueError(f"Unknown counter: {counter!r}")
        column = getattr(Like, counter)
        stmt = (
            update(Like)
            .where(
                Like.likeable_type == likeable_type.value,
                Like.likeable_id == likeable_id,
            )
            .values({column: column + 1})
            .execution_options(synchronize_session=False)
        )
        return int(self.session.execute(stmt).rowcount or 0)

    def delete_for(self, likeable_type: LikeableType, likeable_ids: Iterable[int]) -> int:
        ids = list(likeable_ids)
        if not ids:
            return 0
        stmt = delete(Like).where(
            Like.likeable_type == likeable_type.value,
            Like.likeable_id.in_(ids),
        )
        return int(self.session.execute(stmt).rowcount or 0)
