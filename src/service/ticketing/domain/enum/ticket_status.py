from enum import Enum


class TicketStatus(str, Enum):
    OPEN = 'open'
    IN_PROGRESS = 'in-progress'
    CLOSED = 'closed'
