from datetime import datetime
from decimal import Decimal
from typing import List, Optional

import attrs

from src.platform.exception.exceptions import (
    ConflictError,
    InvalidStateError,
    LimitExceededError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from src.platform.types.datetime_utils import ensure_utc, utc_now
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.domain.enum.ticket_priority import TicketPriority
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.enum.ticket_type import TicketType


MAX_ASSIGNEES = 5


@attrs.define
class TicketEntity:
    title: str
    description: str
    type: TicketType
    venue: str
    status: TicketStatus
    price: float
    priority: TicketPriority
    due_date: datetime
    created_by: int
    assigned_users: List[int] = attrs.field(factory=list)
    id: Optional[int] = None

    @classmethod
    def create(
        cls,
        *,
        title: str,
        description: str,
        type: TicketType,
        venue: str,
        status: TicketStatus,
        price: float | Decimal,
        priority: TicketPriority,
        due_date: datetime,
        created_by: int,
        now: Optional[datetime] = None,
    ) -> 'TicketEntity':
        due_date = ensure_utc(due_date)
        if due_date <= (now or utc_now()):
            raise ValidationError(
                'Due date must be in the future.',
                errors_validation=[{'due_date': 'due_date must be in the future'}],
            )
        if price < 0:
            raise ValidationError(
                'Price must not be negative.',
                errors_validation=[{'price': 'price should be a non-negative number'}],
            )

        return cls(
            title=title,
            description=description,
            type=TicketType(type),
            venue=venue,
            status=TicketStatus(status),
            price=float(price),
            priority=TicketPriority(priority),
            due_date=due_date,
            created_by=created_by,
            assigned_users=[],
        )

    @staticmethod
    def validate_found(ticket: Optional['TicketEntity'], ticket_id: int) -> 'TicketEntity':
        if ticket is None:
            raise NotFoundError(f'Ticket with id:{ticket_id} not found.')
        return ticket

    def ensure_assignable_by(self, requester: UserEntity) -> None:
        """Closed-state check runs before authorization; callers rely on that order."""
        if self.status == TicketStatus.CLOSED:
            raise InvalidStateError('Cannot assign users to a closed ticket.')
        if not (requester.is_admin or requester.id == self.created_by):
            raise UnauthorizedError('Only the ticket creator or an admin can assign users.')

    def add_assignee(
        self, assignee: UserEntity, *, max_assignees: int = MAX_ASSIGNEES
    ) -> None:
        assignee.validate_assignable()
        if assignee.id in self.assigned_users:
            raise ConflictError('User already assigned')
        if len(self.assigned_users) >= min(max_assignees, MAX_ASSIGNEES):
            raise LimitExceededError('User assignment limit reached')
        assert assignee.id is not None
        self.assigned_users.append(assignee.id)
