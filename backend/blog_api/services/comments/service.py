"""Comments attached to articles."""

from __future__ import annotations

import logging

from blog_api.models.comment import Comment
from blog_api.models.like import LikeableType
from blog_api.services._shared.base import BaseService
from blog_api.services._shared.errors import NotFoundError
from blog_api.services.comments.dto import CommentCreateIn, CommentOut, CommentUpdateIn

log = logging.getLogger(__name__)


class CommentService(BaseService):
    """List, read, create, edit and remove comments of an article."""

    def list_for_article(self, article_id: int) -> list[CommentOut]:
        """
        :raises NotFoundError: If the article does not exist.
        """
        with self.ro_uow() as uow:
            if not uow.articles.exists(id=article_id):
                raise NotFoundError("Article", article_id)
            return [self._to_out(c) for c in uow.comments.list_for_article(article_id)]

    def get_comment(self, comment_id: int) -> CommentOut:
        with self.ro_uow() as uow:
            comment = uow.comments.get(comment_id)
            if comment is None:
                raise NotFoundError("Comment", comment_id)
            return self._to_out(comment)

    def create_comment(self, dto: CommentCreateIn) -> CommentOut:
        """
        :raises NotFoundError: If the article does not exist.
        """
        with self.rw_uow() as uow:
            if not uow.articles.exists(id=dto.article_id):
                raise NotFoundError("Article", dto.article_id)
            comment = uow.comments.add(Comment(article_id=dto.article_id, content=dto.content))
            uow.session.refresh(comment)
            out = self._to_out(comment)
        log.info("comment.created id=%s article_id=%s", out.id, out.article_id)
        return out

    def update_comment(self, dto: CommentUpdateIn) -> CommentOut:
        with self.rw_uow() as uow:
            comment = uow.comments.get_for_update(dto.comment_id)
            if comment is None:
                raise NotFoundError("Comment", dto.comment_id)
            uow.comments.assign_updates(comment, {"content": dto.content})
            uow.session.refresh(comment)
            return self._to_out(comment)

    def delete_comment(self, comment_id: int) -> None:
        """Delete the comment and its like counters."""
        with self.rw_uow() as uow:
            comment = uow.comments.get_for_update(comment_id)
            if comment is None:
                raise NotFoundError("Comment", comment_id)
            uow.likes.delete_for(LikeableType.COMMENT, [comment_id])
            uow.comments.delete(comment)
        log.info("comment.deleted id=%s", comment_id)

    @staticmethod
    def _to_out(comment: Comment) -> CommentOut:
        return CommentOut(
            id=comment.id,
            article_id=comment.article_id,
            content=comment.content,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
