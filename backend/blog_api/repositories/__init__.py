"""Repository package exposing persistence-layer access for all domain models."""

from __future__ import annotations

from blog_api.repositories.article import ArticleRepository, ImageRepository
from blog_api.repositories.base import BaseRepository, apply_sorting
from blog_api.repositories.comment import CommentRepository
from blog_api.repositories.issued_token import IssuedTokenRepository
from blog_api.repositories.like import LikeRepository
from blog_api.repositories.user import UserRepository

__all__ = [
    # Base
    "BaseRepository",
    "apply_sorting",
    # Domain
    "ArticleRepository",
    "CommentRepository",
    "ImageRepository",
    "IssuedTokenRepository",
    "LikeRepository",
    "UserRepository",
]
