from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from src.service.ticketing.domain.enum.ticket_priority import TicketPriority
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.enum.ticket_type import TicketType


class CreateTicketRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'title': 'Jazz Night',
                'description': 'Front row seats',
                'type': 'concert',
                'venue': 'Blue Note',
                'status': 'open',
                'price': 200,
                'priority': 'low',
                'due_date': '2030-01-01T20:00:00Z',
            }
        }
    )

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    type: TicketType
    venue: str = Field(..., min_length=1, max_length=255)
    status: TicketStatus = TicketStatus.OPEN
    price: float = Field(..., ge=0)
    priority: TicketPriority
    due_date: datetime


class AssignUserRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(..., alias='userId', gt=0)


class TicketResponse(BaseModel):
    id: int
    title: str
    description: str
    type: TicketType
    venue: str
    status: TicketStatus
    price: float
    priority: TicketPriority
    due_date: datetime
    created_by: int
    assigned_users: List[int]


class AssigneeResponse(BaseModel):
    id: int
    name: str
    email: str


class TicketDetailResponse(BaseModel):
    id: int
    title: str
    description: str
    type: TicketType
    venue: str
    status: TicketStatus
    price: float
    priority: TicketPriority
    due_date: datetime
    created_by: int
    assigned_users: List[AssigneeResponse]
