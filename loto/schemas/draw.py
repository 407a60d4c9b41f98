"""Schemas for publishing draw results."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields


class DrawPublishSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    # Shape is checked by the draw service so it can report missing_or_invalid_numbers.
    numbers = fields.Raw(required=False, load_default=None)


class DrawSchema(Schema):
    id = fields.Int()
    round_id = fields.Int(data_key="roundId")
    numbers = fields.List(fields.Int())
    created_at = fields.DateTime(data_key="createdAt")
