"""
Unit tests for ArticleService against the in-memory database.
"""

from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from blog_api.models import Article, Comment, Image, Like, LikeableType
from blog_api.repositories.article import ArticleRepository
from blog_api.services._shared.errors import NotFoundError, ValidationError
from blog_api.services.articles.dto import ArticleCreateIn, ArticleUpdateIn
from blog_api.services.articles.service import IMAGE_PAIR_REQUIRED, ArticleService
from tests.factories.article import ArticleFactory, ImageFactory
from tests.factories.comment import CommentFactory, LikeFactory
from tests.helpers.utils import count


@pytest.fixture()
def service(app) -> ArticleService:
    return ArticleService()


class TestArticleQueries:
    def test_list_is_ordered_by_id(self, service):
        first = ArticleFactory(title="first")
        second = ArticleFactory(title="second", image=ImageFactory(image_alt="alt"))

        out = service.list_articles()

        assert [a.id for a in out] == [first.id, second.id]
        assert out[0].image is None and out[0].image_alt is None
        assert out[1].image_alt == "alt"

    def test_list_empty(self, service):
        assert service.list_articles() == []

    def test_get_missing_article(self, service):
        with pytest.raises(NotFoundError) as exc_info:
            service.get_article(999)
        assert str(exc_info.value) == "Article not found"


class TestCreateArticle:
    def test_create_without_image(self, service):
        out = service.create_article(ArticleCreateIn(title="T", description="D"))

        assert out.id is not None
        assert out.image_id is None
        assert out.created_at is not None
        assert count(Image) == 0

    def test_create_with_image_pair(self, service):
        out = service.create_article(
            ArticleCreateIn(title="T", image="data:image/png;base64,AAAA", image_alt="A cat")
        )

        assert out.image_id is not None
        assert out.image == "data:image/png;base64,AAAA"
        assert out.image_alt == "A cat"
        assert count(Image) == 1

    @pytest.mark.parametrize(
        "kwargs",
        [{"image": "data:image/png;base64,AAAA"}, {"image_alt": "alt only"}],
    )
    def test_create_with_half_a_pair_writes_nothing(self, service, kwargs):
        with pytest.raises(ValidationError) as exc_info:
            service.create_article(ArticleCreateIn(title="T", **kwargs))

        assert str(exc_info.value) == IMAGE_PAIR_REQUIRED
        assert count(Article) == 0
        assert count(Image) == 0

    def test_failed_article_insert_discards_image(self, service, monkeypatch):
        """
        GIVEN an image pair that is stored before the article
        WHEN inserting the article fails
        THEN the image row is rolled back with it.
        """

        def failing_add(self, instance):
            raise IntegrityError("INSERT INTO articles", {}, Exception("constraint failed"))

        monkeypatch.setattr(ArticleRepository, "add", failing_add)

        with pytest.raises(IntegrityError):
            service.create_article(ArticleCreateIn(title="T", image="x", image_alt="y"))

        assert count(Image) == 0
        assert count(Article) == 0


class TestUpdateArticle:
    def test_only_supplied_fields_change(self, service):
        article = ArticleFactory(title="old", description="keep me")

        out = service.update_article(ArticleUpdateIn(article.id, {"title": "new"}))

        assert out.title == "new"
        assert out.description == "keep me"

    def test_fields_can_be_cleared(self, service):
        article = ArticleFactory(short_description="short")
        out = service.update_article(ArticleUpdateIn(article.id, {"short_description": None}))
        assert out.short_description is None

    def test_creates_image_from_complete_pair(self, service):
        article = ArticleFactory()

        out = service.update_article(
            ArticleUpdateIn(article.id, {"image": "data:,x", "image_alt": "x"})
        )

        assert out.image_id is not None
        assert (out.image, out.image_alt) == ("data:,x", "x")

    def test_rejects_unpaired_image_without_existing_one(self, service):
        article = ArticleFactory(title="untouched")

        with pytest.raises(ValidationError):
            service.update_article(
                ArticleUpdateIn(article.id, {"title": "changed", "image_alt": "x"})
            )

        assert service.get_article(article.id).title == "untouched"
        assert count(Image) == 0

    def test_merges_into_existing_image(self, service):
        article = ArticleFactory(image=ImageFactory(image="data:,old", image_alt="old alt"))

        out = service.update_article(ArticleUpdateIn(article.id, {"image_alt": "new alt"}))

        assert out.image == "data:,old"
        assert out.image_alt == "new alt"
        assert count(Image) == 1

    def test_null_pair_removes_existing_image(self, service):
        article = ArticleFactory(image=ImageFactory())
        other = ArticleFactory(image=ImageFactory(image_alt="kept"))

        out = service.update_article(
            ArticleUpdateIn(article.id, {"image": None, "image_alt": None})
        )

        assert out.image_id is None
        assert out.image is None and out.image_alt is None
        assert count(Image) == 1
        assert service.get_article(other.id).image_alt == "kept"

    def test_null_pair_without_image_is_noop(self, service):
        article = ArticleFactory(title="same")

        out = service.update_article(
            ArticleUpdateIn(article.id, {"image": None, "image_alt": None})
        )

        assert out.image_id is None
        assert out.title == "same"
        assert count(Image) == 0

    def test_nulling_half_of_existing_image_is_rejected(self, service):
        article = ArticleFactory(image=ImageFactory(image="data:,keep", image_alt="alt"))

        with pytest.raises(ValidationError):
            service.update_article(ArticleUpdateIn(article.id, {"image": None}))

        out = service.get_article(article.id)
        assert (out.image, out.image_alt) == ("data:,keep", "alt")

    def test_update_missing_article(self, service):
        with pytest.raises(NotFoundError):
            service.update_article(ArticleUpdateIn(404, {"title": "x"}))


class TestDeleteArticle:
    def test_delete_cascades_to_dependents(self, service):
        article = ArticleFactory(image=ImageFactory())
        comment = CommentFactory(article_id=article.id)
        LikeFactory(likeable_id=article.id, likes=2)
        LikeFactory(likeable_type=LikeableType.COMMENT.value, likeable_id=comment.id, dislikes=1)
        other = ArticleFactory()
        CommentFactory(article_id=other.id)

        service.delete_article(article.id)

        assert count(Article) == 1
        assert count(Image) == 0
        assert count(Comment) == 1
        assert count(Like) == 0

    def test_delete_without_image_keeps_other_images(self, service):
        ArticleFactory(image=ImageFactory())
        plain = ArticleFactory()

        service.delete_article(plain.id)

        assert count(Article) == 1
        assert count(Image) == 1

    def test_delete_missing_article(self, service):
        with pytest.raises(NotFoundError):
            service.delete_article(1)
