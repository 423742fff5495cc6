from .base import Base
from .enums import UserRole, UnitStatus, PaymentStatus, MaintenanceStatus, PropertyStatus
from .user import User
from .property import Property
from .unit import Unit
from .tenant import Tenant
from .payment import Payment
from .maintenance import Maintenance
from .association import Association
from .board_member import BoardMember
from .owner import Owner
from .account_type import AccountType
from .account import Account
from .transaction_type import TransactionType
from .transaction import Transaction

# Dependency order: every table appears after the tables it references.
TABLE_ORDER = (
     User.__table__,
     Property.__table__,
     Unit.__table__,
     Tenant.__table__,
     Payment.__table__,
     Maintenance.__table__,
     Association.__table__,
     BoardMember.__table__,
     Owner.__table__,
     AccountType.__table__,
     Account.__table__,
     TransactionType.__table__,
     Transaction.__table__,
)

__all__ = [
     "Base",
     "TABLE_ORDER",
     "UserRole",
     "UnitStatus",
     "PaymentStatus",
     "MaintenanceStatus",
     "PropertyStatus",
     "User",
     "Property",
     "Unit",
     "Tenant",
     "Payment",
     "Maintenance",
     "Association",
     "BoardMember",
     "Owner",
     "AccountType",
     "Account",
     "TransactionType",
     "Transaction",
]
