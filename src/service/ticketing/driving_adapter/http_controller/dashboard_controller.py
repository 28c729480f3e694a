from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.query.get_dashboard_analytics_use_case import (
    GetDashboardAnalyticsUseCase,
)
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.domain.value_object.ticket_filter import TicketFilter
from src.service.ticketing.driving_adapter.http_controller.schema.analytics_schema import (
    DashboardAnalyticsResponse,
    PriorityBucketResponse,
)
from src.service.ticketing.driving_adapter.http_controller.schema.common_schema import (
    SuccessResponse,
)
from src.service.ticketing.driving_adapter.http_controller.ticket_controller import (
    get_ticket_filter,
)
from src.service.ticketing.driving_adapter.http_controller.user_controller import (
    get_current_user,
)


router = APIRouter()


@router.get('/analytics', response_model=SuccessResponse[DashboardAnalyticsResponse])
@Logger.io
async def get_dashboard_analytics(
    current_user: UserEntity = Depends(get_current_user),
    ticket_filter: TicketFilter = Depends(get_ticket_filter),
    use_case: GetDashboardAnalyticsUseCase = Depends(GetDashboardAnalyticsUseCase.depends),
) -> SuccessResponse[DashboardAnalyticsResponse]:
    analytics = await use_case.execute(ticket_filter=ticket_filter)

    return SuccessResponse(
        message='Success',
        data=DashboardAnalyticsResponse(
            total_tickets=analytics.total_tickets,
            closed_tickets=analytics.closed_tickets,
            open_tickets=analytics.open_tickets,
            in_progress_tickets=analytics.in_progress_tickets,
            average_customer_spending=analytics.average_customer_spending,
            average_tickets_booked_per_day=analytics.average_tickets_booked_per_day,
            priority_distribution={
                priority: PriorityBucketResponse(
                    count=bucket.count, avg_tickets_per_day=bucket.avg_tickets_per_day
                )
                for priority, bucket in analytics.priority_distribution.items()
            },
            type_distribution=analytics.type_distribution,
        ),
    )
