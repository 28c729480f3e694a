"""
Translate a TicketFilter into SQLAlchemy predicates.

Every user-supplied value goes through a bound parameter; nothing is
formatted into SQL text.
"""

from typing import List

from sqlalchemy import ColumnElement

from src.service.ticketing.domain.value_object.ticket_filter import TicketFilter
from src.service.ticketing.driven_adapter.model.ticket_model import TicketModel


def build_ticket_predicates(ticket_filter: TicketFilter) -> List[ColumnElement[bool]]:
    predicates: List[ColumnElement[bool]] = []

    if ticket_filter.start_date is not None:
        predicates.append(TicketModel.due_date >= ticket_filter.start_date)
    if ticket_filter.end_date is not None:
        predicates.append(TicketModel.due_date <= ticket_filter.end_date)
    if ticket_filter.status is not None:
        predicates.append(TicketModel.status == ticket_filter.status.value)
    if ticket_filter.priority is not None:
        predicates.append(TicketModel.priority == ticket_filter.priority.value)
    if ticket_filter.type is not None:
        predicates.append(TicketModel.type == ticket_filter.type.value)
    if ticket_filter.venue is not None:
        predicates.append(TicketModel.venue == ticket_filter.venue)

    return predicates
