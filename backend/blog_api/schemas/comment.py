"""Comment resource schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate


class CommentWriteSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    content = fields.String(required=True, validate=validate.Length(min=1))


class CommentSchema(Schema):
    id = fields.Integer(required=True)
    article_id = fields.Integer(data_key="articleId", required=True)
    content = fields.String(allow_none=True)
    created_at = fields.DateTime(data_key="createdAt", allow_none=True)
    updated_at = fields.DateTime(data_key="updatedAt", allow_none=True)
