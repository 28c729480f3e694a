from typing import List, Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.entity.user_entity import UserEntity


@attrs.frozen
class TicketDetail:
    ticket: TicketEntity
    assignees: List[UserEntity]


class GetTicketUseCase:
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
    async def execute(self, *, ticket_id: int) -> TicketDetail:
        ticket = TicketEntity.validate_found(
            await self.ticket_query_repo.find_by_id(ticket_id), ticket_id
        )
        # assignees come back in assignment order
        assignees = await self.ticket_query_repo.find_users_by_ids(ticket.assigned_users)
        return TicketDetail(ticket=ticket, assignees=assignees)
