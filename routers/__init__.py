from .auth import router as auth_router, users_router
from .properties import router as properties_router, units_router, owners_router
from .tenants import router as tenants_router, payments_router, maintenance_router
from .associations import router as associations_router, board_members_router
from .ledger import (
     account_types_router,
     accounts_router,
     transaction_types_router,
     transactions_router,
)
from .reports import router as reports_router
from .diagnostics import router as diagnostics_router

ALL_ROUTERS = [
     auth_router,
     users_router,
     properties_router,
     units_router,
     owners_router,
     tenants_router,
     payments_router,
     maintenance_router,
     associations_router,
     board_members_router,
     account_types_router,
     accounts_router,
     transaction_types_router,
     transactions_router,
     reports_router,
     diagnostics_router,
]

__all__ = ["ALL_ROUTERS"]
