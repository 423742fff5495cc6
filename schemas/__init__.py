from .property import (
     PropertyCreate,
     PropertyResponse,
     UnitCreate,
     UnitResponse,
     OwnerCreate,
     OwnerResponse,
)
from .tenant import (
     TenantCreate,
     TenantResponse,
     PaymentCreate,
     PaymentResponse,
     MaintenanceCreate,
     MaintenanceResponse,
)
from .association import (
     AssociationCreate,
     AssociationResponse,
     BoardMemberCreate,
     BoardMemberResponse,
)
from .ledger import (
     AccountTypeCreate,
     AccountTypeResponse,
     AccountCreate,
     AccountResponse,
     TransactionTypeCreate,
     TransactionTypeResponse,
     TransactionCreate,
     TransactionResponse,
)
from .user import UserCreate, UserResponse, LoginRequest, TokenResponse
from .report import ReportResponse

__all__ = [
     "PropertyCreate",
     "PropertyResponse",
     "UnitCreate",
     "UnitResponse",
     "OwnerCreate",
     "OwnerResponse",
     "TenantCreate",
     "TenantResponse",
     "PaymentCreate",
     "PaymentResponse",
     "MaintenanceCreate",
     "MaintenanceResponse",
     "AssociationCreate",
     "AssociationResponse",
     "BoardMemberCreate",
     "BoardMemberResponse",
     "AccountTypeCreate",
     "AccountTypeResponse",
     "AccountCreate",
     "AccountResponse",
     "TransactionTypeCreate",
     "TransactionTypeResponse",
     "TransactionCreate",
     "TransactionResponse",
     "UserCreate",
     "UserResponse",
     "LoginRequest",
     "TokenResponse",
     "ReportResponse",
]
