"""Ticketing Domain Enums"""

from src.service.ticketing.domain.enum.ticket_priority import TicketPriority
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.enum.ticket_type import TicketType
from src.service.ticketing.domain.enum.user_type import UserType

__all__ = ['TicketPriority', 'TicketStatus', 'TicketType', 'UserType']
