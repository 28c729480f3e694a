"""
Ticket Type Enum

One closed set shared by ticket creation, analytics filters and both
analytics payloads, so every distribution reports the same keys.
"""

from enum import Enum


class TicketType(str, Enum):
    CONCERT = 'concert'
    MOVIE = 'movie'
    SPORTS = 'sports'
    THEATRE = 'theatre'
    EXHIBITION = 'exhibition'
    CONFERENCE = 'conference'
