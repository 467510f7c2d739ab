"""Article resource schemas (camelCase on the wire)."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate


class ArticleWriteSchema(Schema):
    """Payload for creating or partially updating an article.

    Load with ``partial=True`` for updates so only supplied keys come back.
    ``title`` is required on create and can never be cleared.
    """

    class Meta:
        unknown = EXCLUDE

    title = fields.String(required=True, validate=validate.Length(min=1, max=255))
    short_description = fields.String(
        data_key="shortDescription", allow_none=True, validate=validate.Length(max=255)
    )
    description = fields.String(allow_none=True)
    image = fields.String(allow_none=True)
    image_alt = fields.String(
        data_key="imageAlt", allow_none=True, validate=validate.Length(max=255)
    )


class ArticleSchema(Schema):
    """Public representation of an article joined with its image."""

    id = fields.Integer(required=True)
    title = fields.String(allow_none=True)
    short_description = fields.String(data_key="shortDescription", allow_none=True)
    description = fields.String(allow_none=True)
    image_id = fields.Integer(data_key="imageId", allow_none=True)
    image = fields.String(allow_none=True)
    image_alt = fields.String(data_key="imageAlt", allow_none=True)
    created_at = fields.DateTime(data_key="createdAt", allow_none=True)
    updated_at = fields.DateTime(data_key="updatedAt", allow_none=True)
