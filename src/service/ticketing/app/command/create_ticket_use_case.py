from datetime import datetime
from typing import Self

import anyio
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.domain.enum.ticket_priority import TicketPriority
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.enum.ticket_type import TicketType


class CreateTicketUseCase:
    """
    Create a ticket owned by the requester.

    The due date is validated before any session is opened, so a rejected
    request never touches the database.
    """

    def __init__(self, *, uow: AbstractUnitOfWork, settings: Settings) -> None:
        self.uow = uow
        self.settings = settings

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        settings: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(uow=uow, settings=settings)

    @Logger.io
    async def execute(
        self,
        *,
        creator: UserEntity,
        title: str,
        description: str,
        type: TicketType,
        venue: str,
        status: TicketStatus,
        price: float,
        priority: TicketPriority,
        due_date: datetime,
    ) -> TicketEntity:
        assert creator.id is not None
        ticket = TicketEntity.create(
            title=title,
            description=description,
            type=type,
            venue=venue,
            status=status,
            price=price,
            priority=priority,
            due_date=due_date,
            created_by=creator.id,
        )

        with anyio.fail_after(self.settings.REQUEST_TIMEOUT_SECONDS):
            async with self.uow:
                created = await self.uow.ticket_command_repo.insert(ticket)
                await self.uow.commit()

        Logger.base.info(f'🎫 [TICKET] Created ticket {created.id} by user {creator.id}')
        return created
