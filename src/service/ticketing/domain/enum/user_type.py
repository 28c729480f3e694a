from enum import Enum


class UserType(str, Enum):
    CUSTOMER = 'customer'
    ADMIN = 'admin'
