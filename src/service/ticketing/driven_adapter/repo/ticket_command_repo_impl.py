"""
Ticket Command Repository Implementation - CQRS Write Side

Never commits; runs on the Unit of Work session and leaves the transaction
boundary to the caller.
"""

from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_command_repo import ITicketCommandRepo
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from src.service.ticketing.driven_adapter.repo.model_mapper import ticket_model_to_entity


class TicketCommandRepoImpl(ITicketCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def insert(self, ticket_entity: TicketEntity) -> TicketEntity:
        async with self.session_factory() as session:
            ticket_model = TicketModel(
                title=ticket_entity.title,
                description=ticket_entity.description,
                type=ticket_entity.type.value,
                venue=ticket_entity.venue,
                status=ticket_entity.status.value,
                price=ticket_entity.price,
                priority=ticket_entity.priority.value,
                due_date=ticket_entity.due_date,
                created_by=ticket_entity.created_by,
                assigned_users=list(ticket_entity.assigned_users),
            )
            session.add(ticket_model)
            await session.flush()

            return ticket_model_to_entity(ticket_model)

    @Logger.io
    async def find_by_id_for_update(self, ticket_id: int) -> Optional[TicketEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TicketModel)
                .where(TicketModel.id == ticket_id)
                .with_for_update()
                .execution_options(populate_existing=True)
            )
            ticket_model = result.scalar_one_or_none()
            if not ticket_model:
                return None
            return ticket_model_to_entity(ticket_model)

    @Logger.io
    async def append_assignee(self, *, ticket_id: int, user_id: int) -> TicketEntity:
        async with self.session_factory() as session:
            result = await session.scalars(
                update(TicketModel)
                .where(TicketModel.id == ticket_id)
                .values(assigned_users=func.array_append(TicketModel.assigned_users, user_id))
                .returning(TicketModel)
                .execution_options(populate_existing=True)
            )
            ticket_model = result.one_or_none()
            if not ticket_model:
                raise NotFoundError(f'Ticket with id:{ticket_id} not found.')
            return ticket_model_to_entity(ticket_model)
