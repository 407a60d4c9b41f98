"""Schemas for round state."""

from __future__ import annotations

from marshmallow import Schema, fields


class RoundSchema(Schema):
    id = fields.Int()
    created_at = fields.DateTime(data_key="createdAt")
    is_open = fields.Bool(data_key="isOpen")


class RoundStatusSchema(Schema):
    is_open = fields.Bool(data_key="isOpen")
    open_round_id = fields.Int(data_key="openRoundId", allow_none=True)
    tickets_in_open_round = fields.Int(data_key="ticketsInOpenRound", allow_none=True)
    latest_round_id = fields.Int(data_key="latestRoundId", allow_none=True)
    latest_draw_numbers = fields.List(fields.Int(), data_key="latestDrawNumbers", allow_none=True)
