from .bootstrap import (
     BootstrapError,
     BootstrapReport,
     RetryPolicy,
     run_bootstrap,
     create_tables,
     drop_tables,
     is_lock_conflict,
     seed_tables,
)
from .reports import build_report

__all__ = [
     "BootstrapError",
     "BootstrapReport",
     "RetryPolicy",
     "run_bootstrap",
     "create_tables",
     "drop_tables",
     "is_lock_conflict",
     "seed_tables",
     "build_report",
]
