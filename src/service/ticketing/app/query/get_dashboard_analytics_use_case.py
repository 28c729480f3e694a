"""
Dashboard analytics - system-wide metrics over the filtered ticket set

One aggregate query per metric. Every metric honours the full filter,
including the date bounds.
"""

from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import AggregationError, StorageError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.ticketing.domain.analytics import (
    DashboardAnalytics,
    average_spending,
    priority_distribution,
    type_distribution,
)
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.value_object.ticket_filter import TicketFilter


class GetDashboardAnalyticsUseCase:
    def __init__(self, *, ticket_query_repo: ITicketQueryRepo) -> None:
        self.ticket_query_repo = ticket_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
    ) -> Self:
        return cls(ticket_query_repo=ticket_query_repo)

    @Logger.io
    async def execute(self, *, ticket_filter: TicketFilter) -> DashboardAnalytics:
        repo = self.ticket_query_repo
        try:
            total = await repo.count(ticket_filter)
            closed = await repo.count(ticket_filter, status=TicketStatus.CLOSED)
            open_ = await repo.count(ticket_filter, status=TicketStatus.OPEN)
            in_progress = await repo.count(ticket_filter, status=TicketStatus.IN_PROGRESS)
            avg_price = await repo.average_price(ticket_filter)
            span = await repo.get_due_date_span(ticket_filter)
            spans_by_priority = await repo.get_due_date_span_by_priority(ticket_filter)
            counts_by_type = await repo.count_by_type(ticket_filter)
        except StorageError as e:
            raise AggregationError() from e

        return DashboardAnalytics(
            total_tickets=total,
            closed_tickets=closed,
            open_tickets=open_,
            in_progress_tickets=in_progress,
            average_customer_spending=average_spending(avg_price),
            average_tickets_booked_per_day=span.tickets_per_day,
            priority_distribution=priority_distribution(spans_by_priority),
            type_distribution=type_distribution(counts_by_type),
        )
