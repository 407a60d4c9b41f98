"""ORM models."""

from loto.models.draw import Draw
from loto.models.round import Round
from loto.models.ticket import Ticket

__all__ = ["Draw", "Round", "Ticket"]
