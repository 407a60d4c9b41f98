"""Schemas for ticket submission and lookup."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields


class TicketSubmitSchema(Schema):
    """Transport shape only; value rules live in loto.validation.

    ``numbers`` is a comma-separated string (HTML form) or a JSON array.
    """

    class Meta:
        unknown = EXCLUDE

    personal_id = fields.Raw(data_key="personalId", required=False, load_default=None)
    numbers = fields.Raw(required=False, load_default=None)


class TicketSchema(Schema):
    id = fields.Str(required=True)
    created_at = fields.DateTime(data_key="createdAt")
    personal_id = fields.Str(data_key="personalId")
    numbers = fields.List(fields.Int())
    round_id = fields.Int(data_key="roundId")


class TicketViewSchema(Schema):
    ticket_id = fields.Str(data_key="id")
    personal_id = fields.Str(data_key="personalId")
    numbers = fields.List(fields.Int())
    round_id = fields.Int(data_key="roundId")
    drawn_numbers = fields.List(fields.Int(), data_key="drawnNumbers", allow_none=True)
    is_drawn = fields.Bool(data_key="isDrawn")
