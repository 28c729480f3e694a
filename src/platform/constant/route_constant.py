# Auth
AUTH_BASE = '/auth'
USER_LOGIN = f'{AUTH_BASE}/login'

# User
USER_BASE = '/users'
USER_CREATE = USER_BASE
USER_GET = f'{USER_BASE}/{{user_id}}'

# Ticket
TICKET_BASE = '/tickets'
TICKET_CREATE = TICKET_BASE
TICKET_GET = f'{TICKET_BASE}/{{ticket_id}}'
TICKET_ASSIGN = f'{TICKET_BASE}/{{ticket_id}}/assign'
TICKET_ANALYTICS = f'{TICKET_BASE}/analytics'

# Dashboard
DASHBOARD_BASE = '/dashboard'
DASHBOARD_ANALYTICS = f'{DASHBOARD_BASE}/analytics'

HEALTH = '/health'
