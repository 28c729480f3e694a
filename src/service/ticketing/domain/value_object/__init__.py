"""Ticketing Domain Value Objects"""

from src.service.ticketing.domain.value_object.ticket_filter import TicketFilter

__all__ = ['TicketFilter']
