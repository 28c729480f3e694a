"""
Ticket analytics value objects and the pure arithmetic behind them.

Booking rate: count / (whole days between earliest and latest due_date + 1).
The +1 keeps single-day spans finite; an empty set has a rate of 0.
"""

from collections import Counter
from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Mapping, Optional

import attrs

from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.enum.ticket_priority import TicketPriority
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.enum.ticket_type import TicketType


def day_span(earliest: datetime, latest: datetime) -> int:
    return max((latest - earliest) // timedelta(days=1), 0)


@attrs.frozen
class DueDateSpan:
    count: int = 0
    earliest: Optional[datetime] = None
    latest: Optional[datetime] = None

    @property
    def tickets_per_day(self) -> float:
        if not self.count or self.earliest is None or self.latest is None:
            return 0.0
        return self.count / (day_span(self.earliest, self.latest) + 1)


@attrs.frozen
class PriorityBucket:
    count: int
    avg_tickets_per_day: float


@attrs.frozen
class DashboardAnalytics:
    total_tickets: int
    closed_tickets: int
    open_tickets: int
    in_progress_tickets: int
    average_customer_spending: float
    average_tickets_booked_per_day: float
    priority_distribution: Dict[TicketPriority, PriorityBucket]
    type_distribution: Dict[TicketType, int]


@attrs.frozen
class TicketAnalytics:
    total_tickets: int
    closed_tickets: int
    open_tickets: int
    in_progress_tickets: int
    priority_distribution: Dict[TicketPriority, int]
    type_distribution: Dict[TicketType, int]
    tickets: List[TicketEntity]


def average_spending(value: Optional[float]) -> float:
    if value is None:
        return 0.0
    return round(float(value), 2)


def priority_distribution(
    spans: Mapping[TicketPriority, DueDateSpan],
) -> Dict[TicketPriority, PriorityBucket]:
    result = {}
    for priority in TicketPriority:
        span = spans.get(priority, DueDateSpan())
        result[priority] = PriorityBucket(
            count=span.count, avg_tickets_per_day=span.tickets_per_day
        )
    return result


def type_distribution(counts: Mapping[TicketType, int]) -> Dict[TicketType, int]:
    return {ticket_type: counts.get(ticket_type, 0) for ticket_type in TicketType}


def summarize_tickets(tickets: Iterable[TicketEntity]) -> TicketAnalytics:
    tickets = list(tickets)
    by_status = Counter(ticket.status for ticket in tickets)
    by_priority = Counter(ticket.priority for ticket in tickets)
    by_type = Counter(ticket.type for ticket in tickets)

    return TicketAnalytics(
        total_tickets=len(tickets),
        closed_tickets=by_status[TicketStatus.CLOSED],
        open_tickets=by_status[TicketStatus.OPEN],
        in_progress_tickets=by_status[TicketStatus.IN_PROGRESS],
        priority_distribution={priority: by_priority[priority] for priority in TicketPriority},
        type_distribution=type_distribution(by_type),
        tickets=tickets,
    )
