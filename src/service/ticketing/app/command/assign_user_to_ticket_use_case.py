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


class AssignUserToTicketUseCase:
    """
    Assign a user to a ticket as one atomic unit.

    Flow (the first failing check wins):
    1. Lock the ticket row (SELECT ... FOR UPDATE) -> NotFound
    2. Ticket closed -> InvalidState
    3. Requester is neither admin nor creator -> Unauthorized
    4. Load the target user -> NotFound
    5. Target is an admin -> InvalidTarget
    6. Target already assigned -> Conflict
    7. Assignee limit reached -> LimitExceeded
    8. Append the user id and commit

    Any error, timeout or cancellation leaves the UoW without a commit, so
    it rolls back.
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
    async def execute(self, *, ticket_id: int, user_id: int, requester: UserEntity) -> TicketEntity:
        with anyio.fail_after(self.settings.REQUEST_TIMEOUT_SECONDS):
            async with self.uow:
                ticket = TicketEntity.validate_found(
                    await self.uow.ticket_command_repo.find_by_id_for_update(ticket_id), ticket_id
                )
                ticket.ensure_assignable_by(requester)

                assignee = UserEntity.validate_found(
                    await self.uow.user_query_repo.get_by_id(user_id), user_id
                )
                ticket.add_assignee(
                    assignee, max_assignees=self.settings.MAX_ASSIGNEES_PER_TICKET
                )

                updated = await self.uow.ticket_command_repo.append_assignee(
                    ticket_id=ticket_id, user_id=user_id
                )
                await self.uow.commit()

        Logger.base.info(f'👥 [ASSIGN] User {user_id} assigned to ticket {ticket_id}')
        return updated
