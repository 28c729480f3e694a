from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from src.service.ticketing.domain.analytics import DueDateSpan
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.domain.enum.ticket_priority import TicketPriority
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.enum.ticket_type import TicketType
from src.service.ticketing.domain.value_object.ticket_filter import TicketFilter


class ITicketQueryRepo(ABC):
    """Ticket read side: lookups plus the filtered aggregates behind analytics"""

    @abstractmethod
    async def find_by_id(self, ticket_id: int) -> Optional[TicketEntity]:
        pass

    @abstractmethod
    async def find_users_by_ids(self, user_ids: Sequence[int]) -> List[UserEntity]:
        """Users in the same order as `user_ids`; unknown ids are skipped."""

    @abstractmethod
    async def query_filtered(self, ticket_filter: TicketFilter) -> List[TicketEntity]:
        pass

    @abstractmethod
    async def count(
        self, ticket_filter: TicketFilter, *, status: Optional[TicketStatus] = None
    ) -> int:
        pass

    @abstractmethod
    async def average_price(self, ticket_filter: TicketFilter) -> Optional[float]:
        pass

    @abstractmethod
    async def get_due_date_span(self, ticket_filter: TicketFilter) -> DueDateSpan:
        pass

    @abstractmethod
    async def get_due_date_span_by_priority(
        self, ticket_filter: TicketFilter
    ) -> Dict[TicketPriority, DueDateSpan]:
        pass

    @abstractmethod
    async def count_by_type(self, ticket_filter: TicketFilter) -> Dict[TicketType, int]:
        pass
