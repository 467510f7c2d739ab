from blog_api.models.article import Article, Image
from blog_api.models.comment import Comment
from blog_api.models.issued_token import IssuedToken
from blog_api.models.like import Like, LikeableType
from blog_api.models.user import User

__all__ = [
    "Article",
    "Comment",
    "Image",
    "IssuedToken",
    "Like",
    "LikeableType",
    "User",
]
