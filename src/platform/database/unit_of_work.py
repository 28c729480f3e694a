"""
Unit of Work Pattern - one database session and transaction per business operation

Architecture:
- UoW owns the session lifecycle
- UoW owns commit/rollback
- Repositories get the shared session through a session factory bound by the UoW
- Use cases coordinate repositories through the UoW
"""

from __future__ import annotations

import abc
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncContextManager, AsyncGenerator, Callable, Optional

import anyio
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import StorageError


if TYPE_CHECKING:
    from src.service.ticketing.app.interface.i_password_hasher import IPasswordHasher
    from src.service.ticketing.app.interface.i_ticket_command_repo import ITicketCommandRepo
    from src.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
    from src.service.ticketing.app.interface.i_user_query_repo import IUserQueryRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the ticketing service

    Usage:
        async with uow:
            ticket = await uow.ticket_command_repo.find_by_id_for_update(ticket_id)
            ...
            await uow.commit()

    Leaving the block without `commit()` rolls back.
    """

    ticket_command_repo: ITicketCommandRepo
    ticket_query_repo: ITicketQueryRepo
    user_query_repo: IUserQueryRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(
        self,
        session_factory: Callable[..., AsyncContextManager[AsyncSession]],
        password_hasher: Optional[IPasswordHasher] = None,
    ) -> None:
        self.session_factory = session_factory
        self.password_hasher = password_hasher
        self.session: Optional[AsyncSession] = None
        self._session_cm: Optional[AsyncContextManager[AsyncSession]] = None

    async def __aenter__(self):
        from src.service.ticketing.driven_adapter.repo.ticket_command_repo_impl import (
            TicketCommandRepoImpl,
        )
        from src.service.ticketing.driven_adapter.repo.ticket_query_repo_impl import (
            TicketQueryRepoImpl,
        )
        from src.service.ticketing.driven_adapter.repo.user_query_repo_impl import (
            UserQueryRepoImpl,
        )

        self._session_cm = self.session_factory()
        self.session = await self._session_cm.__aenter__()

        # Repositories share the UoW session
        self.ticket_command_repo = TicketCommandRepoImpl(session_factory=self._shared_session)
        self.ticket_query_repo = TicketQueryRepoImpl(session_factory=self._shared_session)
        self.user_query_repo = UserQueryRepoImpl(
            session_factory=self._shared_session, password_hasher=self.password_hasher
        )

        return await super().__aenter__()

    async def __aexit__(self, exc_type, exc, tb):
        # cleanup must finish even when the request was cancelled or timed out
        with anyio.CancelScope(shield=True):
            try:
                await super().__aexit__(exc_type, exc, tb)
            finally:
                session_cm, self._session_cm, self.session = self._session_cm, None, None
                if session_cm is not None:
                    await session_cm.__aexit__(exc_type, exc, tb)

    @asynccontextmanager
    async def _shared_session(self) -> AsyncGenerator[AsyncSession, None]:
        assert self.session is not None, 'Unit of Work used outside `async with`'
        try:
            yield self.session
        except (SQLAlchemyError, OSError) as e:
            raise StorageError() from e

    async def _commit(self):
        assert self.session is not None
        try:
            await self.session.commit()
        except (SQLAlchemyError, OSError) as e:
            raise StorageError() from e

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
