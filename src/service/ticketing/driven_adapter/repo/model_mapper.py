from src.platform.types.datetime_utils import ensure_utc
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.domain.enum.ticket_priority import TicketPriority
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.enum.ticket_type import TicketType
from src.service.ticketing.domain.enum.user_type import UserType
from src.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from src.service.ticketing.driven_adapter.model.user_model import UserModel


def ticket_model_to_entity(ticket_model: TicketModel) -> TicketEntity:
    return TicketEntity(
        id=ticket_model.id,
        title=ticket_model.title,
        description=ticket_model.description,
        type=TicketType(ticket_model.type),
        venue=ticket_model.venue,
        status=TicketStatus(ticket_model.status),
        price=float(ticket_model.price),
        priority=TicketPriority(ticket_model.priority),
        due_date=ensure_utc(ticket_model.due_date),
        created_by=ticket_model.created_by,
        assigned_users=list(ticket_model.assigned_users or []),
    )


def user_model_to_entity(user_model: UserModel) -> UserEntity:
    return UserEntity(
        id=user_model.id,
        email=user_model.email,
        name=user_model.name,
        hashed_password=user_model.hashed_password,
        type=UserType(user_model.type),
        created_at=user_model.created_at,
    )
