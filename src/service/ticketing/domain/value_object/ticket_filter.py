"""
Ticket Filter - the parsed, validated form of the analytics query parameters.

Every field is optional; an empty filter matches all tickets. Date bounds
apply to `due_date` and are inclusive. A date-only `end_date` covers the
whole day.
"""

from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Any, Optional, TypeVar

import attrs

from src.platform.exception.exceptions import ValidationError
from src.platform.types.datetime_utils import ensure_utc
from src.service.ticketing.domain.enum.ticket_priority import TicketPriority
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.enum.ticket_type import TicketType


_E = TypeVar('_E', bound=Enum)


@attrs.frozen
class TicketFilter:
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: Optional[TicketStatus] = None
    priority: Optional[TicketPriority] = None
    type: Optional[TicketType] = None
    venue: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return all(value is None for value in attrs.astuple(self))

    @classmethod
    def parse(
        cls,
        *,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        status: Optional[str] = None,
        priority: Optional[str] = None,
        type: Optional[str] = None,
        venue: Optional[str] = None,
    ) -> 'TicketFilter':
        errors: list[dict[str, Any]] = []

        start = _parse_bound('startDate', start_date, errors, end_of_day=False)
        end = _parse_bound('endDate', end_date, errors, end_of_day=True)
        if start and end and start > end:
            errors.append({'startDate': 'startDate must not be later than endDate'})

        parsed = cls(
            start_date=start,
            end_date=end,
            status=_parse_enum('status', status, TicketStatus, errors),
            priority=_parse_enum('priority', priority, TicketPriority, errors),
            type=_parse_enum('type', type, TicketType, errors),
            venue=_blank_to_none(venue),
        )

        if errors:
            raise ValidationError('Invalid analytics filter', errors_validation=errors)
        return parsed


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _parse_bound(
    field: str, raw: Optional[str], errors: list[dict[str, Any]], *, end_of_day: bool
) -> Optional[datetime]:
    value = _blank_to_none(raw)
    if value is None:
        return None

    try:
        day = date.fromisoformat(value)
    except ValueError:
        pass
    else:
        if end_of_day:
            return datetime.combine(day, time.max, tzinfo=timezone.utc)
        return datetime.combine(day, time.min, tzinfo=timezone.utc)

    try:
        return ensure_utc(datetime.fromisoformat(value.replace('Z', '+00:00')))
    except ValueError:
        errors.append({field: f"'{value}' is not a valid ISO 8601 date"})
        return None


def _parse_enum(
    field: str, raw: Optional[str], enum_cls: type[_E], errors: list[dict[str, Any]]
) -> Optional[_E]:
    value = _blank_to_none(raw)
    if value is None:
        return None
    try:
        return enum_cls(value.lower())
    except ValueError:
        allowed = ', '.join(str(member.value) for member in enum_cls)
        errors.append({field: f"'{value}' is not one of: {allowed}"})
        return None

