"""Convenience exports for application schemas."""

from __future__ import annotations

from .article import ArticleSchema, ArticleWriteSchema
from .auth import LoginSchema, RegisterSchema, SignInResponseSchema, UserSchema
from .comment import CommentSchema, CommentWriteSchema
from .like import LikeCountsSchema, ReactionSchema

__all__ = [
    "ArticleSchema",
    "ArticleWriteSchema",
    "CommentSchema",
    "CommentWriteSchema",
    "LikeCountsSchema",
    "LoginSchema",
    "ReactionSchema",
    "RegisterSchema",
    "SignInResponseSchema",
    "UserSchema",
]
