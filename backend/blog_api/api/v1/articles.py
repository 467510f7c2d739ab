"""Article endpoints."""

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
from blog_api.schemas import ArticleSchema, ArticleWriteSchema
from blog_api.services.articles.dto import ArticleCreateIn, ArticleUpdateIn

bp = Blueprint("articles", __name__)

article_schema = ArticleSchema()
article_list_schema = ArticleSchema(many=True)
article_write_schema = ArticleWriteSchema()


@bp.get("")
@timing
def list_articles():
    """Return every article with its image fields."""

    items = services().articles.list_articles()
    return json_response(article_list_schema.dump(items))


@bp.get("/<int:article_id>")
@timing
def get_article(article_id: int):
    article = services().articles.get_article(article_id)
    return json_response(article_schema.dump(article))


@bp.post("")
@require_auth
@timing
def create_article():
    """Create an article; ``image`` and ``imageAlt`` travel together."""

    data = article_write_schema.load(json_body())
    article = services().articles.create_article(ArticleCreateIn(**data))
    return json_response(article_schema.dump(article), status=201)


@bp.route("/<int:article_id>", methods=["PATCH", "PUT"])
@require_auth
@timing
def update_article(article_id: int):
    """Apply the supplied fields only (PUT behaves like PATCH)."""

    changes = article_write_schema.load(json_body(), partial=True)
    article = services().articles.update_article(
        ArticleUpdateIn(article_id=article_id, changes=changes)
    )
    return json_response(article_schema.dump(article))


@bp.delete("/<int:article_id>")
@require_auth
@timing
def delete_article(article_id: int):
    services().articles.delete_article(article_id)
    return empty_response()
