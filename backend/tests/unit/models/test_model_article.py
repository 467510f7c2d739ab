"""Unit tests for articles, images, comments and likes models."""

from __future__ import annotations

import pytest

from blog_api.models import LikeableType
from tests.factories.article import ArticleFactory, ImageFactory
from tests.factories.comment import CommentFactory, LikeFactory


def test_article_links_image(session):
    image = ImageFactory(image="abc", image_alt="alt")
    article = ArticleFactory(image=image)
    assert article.image_id == image.id
    assert article.image.image_alt == "alt"


def test_article_timestamps_filled_by_database(session):
    article = ArticleFactory()
    session.refresh(article)
    assert article.created_at is not None
    assert article.updated_at is not None


def test_comment_belongs_to_article(session):
    article = ArticleFactory()
    comment = CommentFactory(article_id=article.id, content="hi")
    assert comment.article_id == article.id


def test_like_counters_default_to_zero(session):
    like = LikeFactory()
    assert (like.likes, like.dislikes) == (0, 0)
    assert like.likeable_type == "Article"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("article", LikeableType.ARTICLE),
        ("Article", LikeableType.ARTICLE),
        (" COMMENT ", LikeableType.COMMENT),
    ],
)
def test_likeable_type_parse(raw, expected):
    assert LikeableType.parse(raw) is expected


def test_likeable_type_parse_unknown():
    with pytest.raises(ValueError):
        LikeableType.parse("user")
