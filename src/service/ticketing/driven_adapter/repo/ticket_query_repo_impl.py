"""
Ticket Query Repository Implementation - CQRS Read Side

Aggregates run in PostgreSQL, one statement per metric. Every statement is
built from `build_ticket_predicates`, so all filter values are bound.
"""

from typing import AsyncContextManager, Callable, Dict, List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.platform.types.datetime_utils import ensure_utc
from src.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.ticketing.domain.analytics import DueDateSpan
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.domain.enum.ticket_priority import TicketPriority
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.enum.ticket_type import TicketType
from src.service.ticketing.domain.value_object.ticket_filter import TicketFilter
from src.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from src.service.ticketing.driven_adapter.model.user_model import UserModel
from src.service.ticketing.driven_adapter.repo.model_mapper import (
    ticket_model_to_entity,
    user_model_to_entity,
)
from src.service.ticketing.driven_adapter.repo.ticket_filter_builder import (
    build_ticket_predicates,
)


class TicketQueryRepoImpl(ITicketQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def find_by_id(self, ticket_id: int) -> Optional[TicketEntity]:
        async with self.session_factory() as session:
            ticket_model = await session.get(TicketModel, ticket_id)
            if not ticket_model:
                return None
            return ticket_model_to_entity(ticket_model)

    @Logger.io
    async def find_users_by_ids(self, user_ids: Sequence[int]) -> List[UserEntity]:
        if not user_ids:
            return []

        async with self.session_factory() as session:
            result = await session.execute(
                select(UserModel).where(UserModel.id.in_(set(user_ids)))
            )
            by_id = {model.id: user_model_to_entity(model) for model in result.scalars()}

        return [by_id[user_id] for user_id in user_ids if user_id in by_id]

    @Logger.io
    async def query_filtered(self, ticket_filter: TicketFilter) -> List[TicketEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TicketModel)
                .where(*build_ticket_predicates(ticket_filter))
                .order_by(TicketModel.id)
            )
            return [ticket_model_to_entity(model) for model in result.scalars()]

    @Logger.io
    async def count(
        self, ticket_filter: TicketFilter, *, status: Optional[TicketStatus] = None
    ) -> int:
        predicates = build_ticket_predicates(ticket_filter)
        if status is not None:
            predicates.append(TicketModel.status == status.value)

        async with self.session_factory() as session:
            result = await session.execute(select(func.count(TicketModel.id)).where(*predicates))
            return result.scalar_one()

    @Logger.io
    async def average_price(self, ticket_filter: TicketFilter) -> Optional[float]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(func.avg(TicketModel.price)).where(*build_ticket_predicates(ticket_filter))
            )
            value = result.scalar_one_or_none()
            return None if value is None else float(value)

    @Logger.io
    async def get_due_date_span(self, ticket_filter: TicketFilter) -> DueDateSpan:
        async with self.session_factory() as session:
            result = await session.execute(
                select(
                    func.count(TicketModel.id),
                    func.min(TicketModel.due_date),
                    func.max(TicketModel.due_date),
                ).where(*build_ticket_predicates(ticket_filter))
            )
            count, earliest, latest = result.one()
            return _to_span(count, earliest, latest)

    @Logger.io
    async def get_due_date_span_by_priority(
        self, ticket_filter: TicketFilter
    ) -> Dict[TicketPriority, DueDateSpan]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(
                    TicketModel.priority,
                    func.count(TicketModel.id),
                    func.min(TicketModel.due_date),
                    func.max(TicketModel.due_date),
                )
                .where(*build_ticket_predicates(ticket_filter))
                .group_by(TicketModel.priority)
            )
            return {
                TicketPriority(priority): _to_span(count, earliest, latest)
                for priority, count, earliest, latest in result.all()
            }

    @Logger.io
    async def count_by_type(self, ticket_filter: TicketFilter) -> Dict[TicketType, int]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TicketModel.type, func.count(TicketModel.id))
                .where(*build_ticket_predicates(ticket_filter))
                .group_by(TicketModel.type)
            )
            return {TicketType(ticket_type): count for ticket_type, count in result.all()}


def _to_span(count, earliest, latest) -> DueDateSpan:
    return DueDateSpan(
        count=count or 0,
        earliest=ensure_utc(earliest) if earliest is not None else None,
        latest=ensure_utc(latest) if latest is not None else None,
    )
