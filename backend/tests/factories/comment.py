"""Factories for comments and like counters."""

from __future__ import annotations

import factory

from blog_api.models.comment import Comment
from blog_api.models.like import Like, LikeableType
from tests.factories import BaseFactory
from tests.factories.article import ArticleFactory


class CommentFactory(BaseFactory):
    class Meta:
        model = Comment

    id = None
    content = factory.Faker("sentence")
    article_id = factory.LazyFunction(lambda: ArticleFactory().id)


class LikeFactory(BaseFactory):
    class Meta:
        model = Like

    id = None
    likes = 0
    dislikes = 0
    likeable_type = LikeableType.ARTICLE.value
    likeable_id = factory.LazyFunction(lambda: ArticleFactory().id)
