"""Like/dislike counter endpoints: ``/likes/<type>/<id>``."""

from __future__ import annotations

from flask import Blueprint

from blog_api.api.deps import json_body, json_response, require_auth, services, timing
from blog_api.schemas import LikeCountsSchema, ReactionSchema
from blog_api.services.likes.dto import ReactIn

bp = Blueprint("likes", __name__)

counts_schema = LikeCountsSchema()
reaction_schema = ReactionSchema()


@bp.get("/<likeable_type>/<int:likeable_id>")
@timing
def get_counts(likeable_type: str, likeable_id: int):
    likes = services().likes
    counts = likes.get_counts(likes.parse_ref(likeable_type, likeable_id))
    return json_response(counts_schema.dump(counts))


@bp.post("/<likeable_type>/<int:likeable_id>")
@require_auth
@timing
def react(likeable_type: str, likeable_id: int):
    """Register a ``like`` (default) or ``dislike`` for the target."""

    likes = services().likes
    ref = likes.parse_ref(likeable_type, likeable_id)
    data = reaction_schema.load(json_body())
    counts = likes.react(ReactIn(target=ref, reaction=likes.parse_reaction(data["reaction"])))
    return json_response(counts_schema.dump(counts))
