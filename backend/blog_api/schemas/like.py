"""Like counter schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate


class ReactionSchema(Schema):
    """Body of ``POST /likes/<type>/<id>``; defaults to a like."""

    class Meta:
        unknown = EXCLUDE

    reaction = fields.String(
        load_default="like",
        validate=validate.OneOf(["like", "dislike"]),
    )


class LikeCountsSchema(Schema):
    likeable_type = fields.String(data_key="likeableType", required=True)
    likeable_id = fields.Integer(data_key="likeableId", required=True)
    likes = fields.Integer(required=True)
    dislikes = fields.Integer(required=True)
