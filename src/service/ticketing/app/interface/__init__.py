"""Application layer interfaces (Ports)"""

from src.service.ticketing.app.interface.i_password_hasher import IPasswordHasher
from src.service.ticketing.app.interface.i_ticket_command_repo import ITicketCommandRepo
from src.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.ticketing.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.ticketing.app.interface.i_user_query_repo import IUserQueryRepo

__all__ = [
    'IPasswordHasher',
    'ITicketCommandRepo',
    'ITicketQueryRepo',
    'IUserCommandRepo',
    'IUserQueryRepo',
]
