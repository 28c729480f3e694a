from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.assign_user_to_ticket_use_case import (
    AssignUserToTicketUseCase,
)
from src.service.ticketing.app.command.create_ticket_use_case import CreateTicketUseCase
from src.service.ticketing.app.query.get_ticket_analytics_use_case import (
    GetTicketAnalyticsUseCase,
)
from src.service.ticketing.app.query.get_ticket_use_case import GetTicketUseCase
from src.service.ticketing.domain.analytics import TicketAnalytics
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.domain.value_object.ticket_filter import TicketFilter
from src.service.ticketing.driving_adapter.http_controller.schema.analytics_schema import (
    TicketAnalyticsResponse,
    TicketSummaryResponse,
)
from src.service.ticketing.driving_adapter.http_controller.schema.common_schema import (
    SuccessResponse,
)
from src.service.ticketing.driving_adapter.http_controller.schema.ticket_schema import (
    AssigneeResponse,
    AssignUserRequest,
    CreateTicketRequest,
    TicketDetailResponse,
    TicketResponse,
)
from src.service.ticketing.driving_adapter.http_controller.user_controller import (
    get_current_user,
)


router = APIRouter()


def get_ticket_filter(
    start_date: Optional[str] = Query(None, alias='startDate'),
    end_date: Optional[str] = Query(None, alias='endDate'),
    status: Optional[str] = Query(None),
    priority: Optional[str] = Query(None),
    type: Optional[str] = Query(None),
    venue: Optional[str] = Query(None),
) -> TicketFilter:
    return TicketFilter.parse(
        start_date=start_date,
        end_date=end_date,
        status=status,
        priority=priority,
        type=type,
        venue=venue,
    )


@router.post(
    '',
    response_model=SuccessResponse[TicketResponse],
    status_code=status.HTTP_201_CREATED,
)
@Logger.io
async def create_ticket(
    request: CreateTicketRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: CreateTicketUseCase = Depends(CreateTicketUseCase.depends),
) -> SuccessResponse[TicketResponse]:
    ticket = await use_case.execute(
        creator=current_user,
        title=request.title,
        description=request.description,
        type=request.type,
        venue=request.venue,
        status=request.status,
        price=request.price,
        priority=request.priority,
        due_date=request.due_date,
    )
    return SuccessResponse(message='Ticket successfully saved.', data=_to_ticket_response(ticket))


@router.get('/analytics', response_model=SuccessResponse[TicketAnalyticsResponse])
@Logger.io
async def get_ticket_analytics(
    current_user: UserEntity = Depends(get_current_user),
    ticket_filter: TicketFilter = Depends(get_ticket_filter),
    use_case: GetTicketAnalyticsUseCase = Depends(GetTicketAnalyticsUseCase.depends),
) -> SuccessResponse[TicketAnalyticsResponse]:
    analytics = await use_case.execute(ticket_filter=ticket_filter)
    return SuccessResponse(
        message='Analytics fetched successfully', data=_to_analytics_response(analytics)
    )


@router.get('/{id}', response_model=SuccessResponse[TicketDetailResponse])
@Logger.io
async def get_ticket(
    id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> SuccessResponse[TicketDetailResponse]:
    detail = await use_case.execute(ticket_id=id)
    ticket = detail.ticket

    return SuccessResponse(
        message='Ticket found',
        data=TicketDetailResponse(
            id=ticket.id or 0,
            title=ticket.title,
            description=ticket.description,
            type=ticket.type,
            venue=ticket.venue,
            status=ticket.status,
            price=ticket.price,
            priority=ticket.priority,
            due_date=ticket.due_date,
            created_by=ticket.created_by,
            assigned_users=[
                AssigneeResponse(id=user.id or 0, name=user.name, email=user.email)
                for user in detail.assignees
            ],
        ),
    )


@router.put('/{id}/assign', response_model=SuccessResponse[TicketResponse])
@Logger.io
async def assign_user(
    id: int,
    request: AssignUserRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: AssignUserToTicketUseCase = Depends(AssignUserToTicketUseCase.depends),
) -> SuccessResponse[TicketResponse]:
    ticket = await use_case.execute(ticket_id=id, user_id=request.user_id, requester=current_user)
    return SuccessResponse(message='User assigned successfully', data=_to_ticket_response(ticket))


def _to_ticket_response(ticket: TicketEntity) -> TicketResponse:
    return TicketResponse(
        id=ticket.id or 0,
        title=ticket.title,
        description=ticket.description,
        type=ticket.type,
        venue=ticket.venue,
        status=ticket.status,
        price=ticket.price,
        priority=ticket.priority,
        due_date=ticket.due_date,
        created_by=ticket.created_by,
        assigned_users=list(ticket.assigned_users),
    )


def _to_analytics_response(analytics: TicketAnalytics) -> TicketAnalyticsResponse:
    return TicketAnalyticsResponse(
        total_tickets=analytics.total_tickets,
        closed_tickets=analytics.closed_tickets,
        open_tickets=analytics.open_tickets,
        in_progress_tickets=analytics.in_progress_tickets,
        priority_distribution=analytics.priority_distribution,
        type_distribution=analytics.type_distribution,
        tickets=[
            TicketSummaryResponse(
                id=ticket.id or 0,
                title=ticket.title,
                status=ticket.status,
                priority=ticket.priority,
                type=ticket.type,
                venue=ticket.venue,
                due_date=ticket.due_date,
                created_by=ticket.created_by,
            )
            for ticket in analytics.tickets
        ],
    )
