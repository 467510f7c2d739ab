"""
Unit tests for LikeService counters.
"""

from __future__ import annotations

import pytest

from blog_api.models import Like, LikeableType
from blog_api.services._shared.errors import NotFoundError, ValidationError
from blog_api.services.likes.dto import LikeableRef, ReactIn, Reaction
from blog_api.services.likes.service import LikeService
from tests.factories.article import ArticleFactory
from tests.factories.comment import CommentFactory
from tests.helpers.utils import count


@pytest.fixture()
def service(app) -> LikeService:
    return LikeService()


class TestParsing:
    @pytest.mark.parametrize("raw", ["article", "Article", " ARTICLE "])
    def test_parse_ref_is_case_insensitive(self, raw):
        ref = LikeService.parse_ref(raw, 3)
        assert ref == LikeableRef(LikeableType.ARTICLE, 3)

    def test_parse_ref_rejects_unknown_type(self):
        with pytest.raises(ValidationError):
            LikeService.parse_ref("user", 1)

    @pytest.mark.parametrize(
        "raw, expected",
        [("like", Reaction.LIKE), ("dislike", Reaction.DISLIKE), ("likes", Reaction.LIKE)],
    )
    def test_parse_reaction(self, raw, expected):
        assert LikeService.parse_reaction(raw) is expected

    def test_parse_reaction_rejects_unknown(self):
        with pytest.raises(ValidationError):
            LikeService.parse_reaction("love")


class TestCounters:
    def test_counts_default_to_zero(self, service):
        article = ArticleFactory()
        out = service.get_counts(LikeableRef(LikeableType.ARTICLE, article.id))
        assert (out.likes, out.dislikes) == (0, 0)
        assert count(Like) == 0

    def test_first_reaction_creates_row_then_increments(self, service):
        """
        GIVEN an article nobody reacted to
        WHEN it is liked twice and disliked once
        THEN a single counter row holds 2 likes and 1 dislike.
        """
        article = ArticleFactory()
        ref = LikeableRef(LikeableType.ARTICLE, article.id)

        service.react(ReactIn(ref, Reaction.LIKE))
        service.react(ReactIn(ref, Reaction.LIKE))
        out = service.react(ReactIn(ref, Reaction.DISLIKE))

        assert (out.likes, out.dislikes) == (2, 1)
        assert out.likeable_type == "Article"
        assert count(Like) == 1

    def test_comment_counters_are_separate(self, service):
        comment = CommentFactory()
        service.react(ReactIn(LikeableRef(LikeableType.COMMENT, comment.id), Reaction.LIKE))

        article_counts = service.get_counts(
            LikeableRef(LikeableType.ARTICLE, comment.article_id)
        )
        assert article_counts.likes == 0

    @pytest.mark.parametrize("likeable_type", [LikeableType.ARTICLE, LikeableType.COMMENT])
    def test_missing_target(self, service, likeable_type):
        ref = LikeableRef(likeable_type, 404)
        with pytest.raises(NotFoundError):
            service.react(ReactIn(ref, Reaction.LIKE))
        with pytest.raises(NotFoundError):
            service.get_counts(ref)
        assert count(Like) == 0
