"""
Analytics response schemas. Serialized with camelCase keys.
"""

from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.service.ticketing.domain.enum.ticket_priority import TicketPriority
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.enum.ticket_type import TicketType


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PriorityBucketResponse(CamelModel):
    count: int
    avg_tickets_per_day: float


class DashboardAnalyticsResponse(CamelModel):
    total_tickets: int
    closed_tickets: int
    open_tickets: int
    in_progress_tickets: int
    average_customer_spending: float
    average_tickets_booked_per_day: float
    priority_distribution: Dict[TicketPriority, PriorityBucketResponse]
    type_distribution: Dict[TicketType, int]


class TicketSummaryResponse(CamelModel):
    id: int
    title: str
    status: TicketStatus
    priority: TicketPriority
    type: TicketType
    venue: str
    due_date: datetime
    created_by: int


class TicketAnalyticsResponse(CamelModel):
    total_tickets: int
    closed_tickets: int
    open_tickets: int
    in_progress_tickets: int
    priority_distribution: Dict[TicketPriority, int]
    type_distribution: Dict[TicketType, int]
    tickets: List[TicketSummaryResponse]
