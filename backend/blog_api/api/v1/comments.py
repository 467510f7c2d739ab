"""Comment endpoints.

Listing and creation are nested under the article
(``/articles/<id>/comments``); single comments live at ``/comments/<id>``.
"""

from __future__ import annotations

from flask import Blueprint

from blog_api.api.deps import (
    empty_response,
    json_body,
    json_response,
    require_auth,
    services,
    timing,
)
from blog_api.schemas import CommentSchema, CommentWriteSchema
from blog_api.services.comments.dto import CommentCreateIn, CommentUpdateIn

bp = Blueprint("comments", __name__)

comment_schema = CommentSchema()
comment_list_schema = CommentSchema(many=True)
comment_write_schema = CommentWriteSchema()


@bp.get("/articles/<int:article_id>/comments")
@timing
def list_comments(article_id: int):
    items = services().comments.list_for_article(article_id)
    return json_response(comment_list_schema.dump(items))


@bp.post("/articles/<int:article_id>/comments")
@require_auth
@timing
def create_comment(article_id: int):
    data = comment_write_schema.load(json_body())
    comment = services().comments.create_comment(
        CommentCreateIn(article_id=article_id, content=data["content"])
    )
    return json_response(comment_schema.dump(comment), status=201)


@bp.get("/comments/<int:comment_id>")
@timing
def get_comment(comment_id: int):
    comment = services().comments.get_comment(comment_id)
    return json_response(comment_schema.dump(comment))


@bp.patch("/comments/<int:comment_id>")
@require_auth
@timing
def update_comment(comment_id: int):
    data = comment_write_schema.load(json_body())
    comment = services().comments.update_comment(
        CommentUpdateIn(comment_id=comment_id, content=data["content"])
    )
    return json_response(comment_schema.dump(comment))


@bp.delete("/comments/<int:comment_id>")
@require_auth
@timing
def delete_comment(comment_id: int):
    services().comments.delete_comment(comment_id)
    return empty_response()
