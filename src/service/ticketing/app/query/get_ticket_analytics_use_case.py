from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import AggregationError, StorageError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.ticketing.domain.analytics import TicketAnalytics, summarize_tickets
from src.service.ticketing.domain.value_object.ticket_filter import TicketFilter


class GetTicketAnalyticsUseCase:
    """Counts and distributions computed over one filtered read of the tickets."""

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
    async def execute(self, *, ticket_filter: TicketFilter) -> TicketAnalytics:
        try:
            tickets = await self.ticket_query_repo.query_filtered(ticket_filter)
        except StorageError as e:
            raise AggregationError() from e
        return summarize_tickets(tickets)
