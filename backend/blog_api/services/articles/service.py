"""
ArticleService
==============

Application service for the ``Article`` aggregate and its ``Image``:

- List and fetch articles joined with their image.
- Create an article, inserting its image first when one is supplied.
- Partially update an article, creating or merging its image.
- Delete an article together with its image, comments and likes.

Every write runs in one read-write unit of work, so a failure leaves no
partial rows behind.
"""

from __future__ import annotations

import logging
from typing import Any

from blog_api.models.article import Article, Image
from blog_api.models.like import LikeableType
from blog_api.services._shared.base import BaseService
from blog_api.services._shared.errors import NotFoundError, ValidationError
from blog_api.services.articles.dto import (
    ARTICLE_FIELDS,
    IMAGE_FIELDS,
    ArticleCreateIn,
    ArticleOut,
    ArticleUpdateIn,
)

log = logging.getLogger(__name__)

IMAGE_PAIR_REQUIRED = "Both image and imageAlt must be provided together"


class ArticleService(BaseService):
    """Application service for articles and their images."""

    # --------------------------------------------------------------------- #
    # Queries
    # --------------------------------------------------------------------- #

    def list_articles(self) -> list[ArticleOut]:
        with self.ro_uow() as uow:
            return [self._to_out(a) for a in uow.articles.list(sort=["id"])]

    def get_article(self, article_id: int) -> ArticleOut:
        """
        :raises NotFoundError: If the article does not exist.
        """
        with self.ro_uow() as uow:
            article = uow.articles.get(article_id)
            if article is None:
                raise NotFoundError("Article", article_id)
            return self._to_out(article)

    # --------------------------------------------------------------------- #
    # Commands
    # --------------------------------------------------------------------- #

    def create_article(self, dto: ArticleCreateIn) -> ArticleOut:
        """
        Insert the image (when given) and then the article referencing it.

        :raises ValidationError: If only one of ``image``/``image_alt`` is given.
        """
        has_image = dto.image is not None
        has_alt = dto.image_alt is not None
        if has_image != has_alt:
            raise ValidationError(IMAGE_PAIR_REQUIRED)

        with self.rw_uow() as uow:
            image_id = None
            if has_image:
                image = uow.images.add(Image(image=dto.image, image_alt=dto.image_alt))
                image_id = image.id
            article = uow.articles.add(
                Article(
                    title=dto.title,
                    short_description=dto.short_description,
                    description=dto.description,
                    image_id=image_id,
                )
            )
            uow.session.refresh(article)
            out = self._to_out(article)

        log.info("article.created id=%s image_id=%s", out.id, out.image_id)
        return out

    def update_article(self, dto: ArticleUpdateIn) -> ArticleOut:
        """
        Apply only the supplied fields.

        Image fields are merged into the current image (if any) and the result
        must be a complete pair. A result where both are ``None`` means no
        image: an existing one is unlinked and deleted.

        :raises NotFoundError: If the article does not exist.
        :raises ValidationError: If the merged image fields are only half set.
        """
        changes = dto.changes
        image_changes = {k: changes[k] for k in IMAGE_FIELDS if k in changes}
        article_changes = {k: changes[k] for k in ARTICLE_FIELDS if k in changes}

        with self.rw_uow() as uow:
            article = uow.articles.get_for_update(dto.article_id)
            if article is None:
                raise NotFoundError("Article", dto.article_id)

            stale_image = None
            if image_changes:
                current = article.image
                merged = {
                    k: image_changes.get(k, getattr(current, k, None)) for k in IMAGE_FIELDS
                }
                if all(v is None for v in merged.values()):
                    if current is not None:
                        stale_image = current
                        article_changes["image_id"] = None
                elif None in merged.values():
                    raise ValidationError(IMAGE_PAIR_REQUIRED)
                elif current is None:
                    image = uow.images.add(Image(**merged))
                    article_changes["image_id"] = image.id
                else:
                    uow.images.assign_updates(current, image_changes)

            if article_changes:
                uow.articles.assign_updates(article, article_changes)
            if stale_image is not None:
                uow.images.delete(stale_image)

            uow.session.refresh(article)
            out = self._to_out(article)

        log.info("article.updated id=%s fields=%s", out.id, sorted(changes))
        return out

    def delete_article(self, article_id: int) -> None:
        """
        Delete the article, its image, its comments and every related like row.

        :raises NotFoundError: If the article does not exist.
        """
        with self.rw_uow() as uow:
            article = uow.articles.get_for_update(article_id)
            if article is None:
                raise NotFoundError("Article", article_id)

            image = article.image
            comment_ids = uow.comments.ids_for_article(article_id)
            uow.likes.delete_for(LikeableType.COMMENT, comment_ids)
            uow.likes.delete_for(LikeableType.ARTICLE, [article_id])
            uow.comments.delete_for_article(article_id)
            uow.articles.delete(article)
            if image is not None:
                uow.images.delete(image)

        log.info("article.deleted id=%s", article_id)

    # --------------------------------------------------------------------- #
    # Helpers
    # --------------------------------------------------------------------- #

    @staticmethod
    def _to_out(article: Article) -> ArticleOut:
        image: Any = article.image
        return ArticleOut(
            id=article.id,
            title=article.title,
            short_description=article.short_description,
            description=article.description,
            image_id=article.image_id,
            image=image.image if image is not None else None,
            image_alt=image.image_alt if image is not None else None,
            created_at=article.created_at,
            updated_at=article.updated_at,
        )
