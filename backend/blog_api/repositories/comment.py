"""Comment repository."""

from __future__ import annotations

from sqlalchemy import delete

from blog_api.models.comment import Comment
from blog_api.repositories.base import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    model = Comment

    def _sortable_fields(self):
        return {"id": Comment.id, "created_at": Comment.created_at}

    def _updatable_fields(self):
        return {"content"}

    def list_for_article(self, article_id: int) -> list[Comment]:
        """Comments of one article, oldest first."""
        return self.list(filters={"article_id": article_id}, sort=["created_at"])

    def ids_for_article(self, article_id: int) -> list[int]:
        return [c.id for c in self.list_for_article(article_id)]

    def delete_for_article(self, article_id: int) -> int:
        result = self.session.execute(delete(Comment).where(Comment.article_id == article_id))
        return int(result.rowcount or 0)
