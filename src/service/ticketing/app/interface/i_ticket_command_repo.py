from abc import ABC, abstractmethod
from typing import Optional

from src.service.ticketing.domain.entity.ticket_entity import TicketEntity


class ITicketCommandRepo(ABC):
    """
    Ticket write side. Always used inside a Unit of Work; the caller owns
    commit/rollback.
    """

    @abstractmethod
    async def insert(self, ticket_entity: TicketEntity) -> TicketEntity:
        pass

    @abstractmethod
    async def find_by_id_for_update(self, ticket_id: int) -> Optional[TicketEntity]:
        """Load the ticket and hold a row lock until the transaction ends."""

    @abstractmethod
    async def append_assignee(self, *, ticket_id: int, user_id: int) -> TicketEntity:
        pass
