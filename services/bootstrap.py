"""
Schema bootstrap - brings the store to the canonical schema plus demo data.

Runs once at process start:
1. Drop every table (children first), ``DROP TABLE IF EXISTS`` with CASCADE where supported
2. Create every table (parents first), skipping tables that already exist
3. Seed demo rows, ignoring rows whose natural key is already present

All three phases share one transaction; any failure rolls the whole
bootstrap back. Lock conflicts (deadlocks, lock wait timeouts) restart the
transaction under a ``RetryPolicy``; every other error is fatal.
"""
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, TypeVar

from sqlalchemy import insert, select
from sqlalchemy.engine import Connection
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.schema import DropTable

from database import Database
from models import TABLE_ORDER
from services import seed_data
from services.security import hash_password

logger = logging.getLogger(__name__)

T = TypeVar("T")

# PostgreSQL SQLSTATEs: deadlock_detected, lock_not_available
LOCK_CONFLICT_SQLSTATES = {"40P01", "55P03"}
# SQL Server: 1205 deadlock victim, 1222 lock request timeout. MySQL: 1213 deadlock.
LOCK_CONFLICT_ERRNOS = {1205, 1222, 1213}
LOCK_CONFLICT_MESSAGES = ("deadlock", "database is locked", "lock request time out")


class BootstrapError(RuntimeError):
     """Bootstrap could not bring the store to the canonical state."""


@compiles(DropTable, "postgresql")
def _drop_table_cascade(element, compiler, **kw):
     return compiler.visit_drop_table(element, **kw) + " CASCADE"


def is_lock_conflict(exc: BaseException) -> bool:
     """True when ``exc`` is a store error caused by a deadlock or lock wait."""
     if not isinstance(exc, DBAPIError):
          return False
     orig = exc.orig
     sqlstate = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
     if sqlstate in LOCK_CONFLICT_SQLSTATES:
          return True
     args = getattr(orig, "args", ())
     if args and isinstance(args[0], int) and args[0] in LOCK_CONFLICT_ERRNOS:
          return True
     message = str(orig).lower()
     return any(fragment in message for fragment in LOCK_CONFLICT_MESSAGES)


@dataclass
class RetryPolicy:
     """Retry configuration for operations that may hit a lock conflict."""
     max_attempts: int = 3
     delay: float = 1.0
     backoff: float = 1.0          # 1.0 = fixed delay
     retryable: Callable[[BaseException], bool] = is_lock_conflict
     sleep: Callable[[float], None] = time.sleep

     @classmethod
     def from_settings(cls, settings) -> "RetryPolicy":
          return cls(
               max_attempts=settings.bootstrap_max_attempts,
               delay=settings.bootstrap_retry_delay,
               backoff=settings.bootstrap_backoff,
          )

     def run(self, fn: Callable[[], T]) -> T:
          """
          Call ``fn`` until it succeeds, it raises a non-retryable error, or
          ``max_attempts`` calls have failed. The last error is re-raised.
          """
          delay = self.delay
          for attempt in range(1, self.max_attempts + 1):
               try:
                    return fn()
               except Exception as exc:
                    if attempt >= self.max_attempts or not self.retryable(exc):
                         raise
                    logger.warning(
                         "Attempt %d/%d hit a lock conflict (%s); retrying in %.1fs",
                         attempt, self.max_attempts, exc, delay,
                    )
                    self.sleep(delay)
                    delay *= self.backoff
          raise ValueError("max_attempts must be at least 1")


@dataclass
class BootstrapReport:
     attempts: int = 0
     dropped: List[str] = field(default_factory=list)
     created: List[str] = field(default_factory=list)
     seeded: Dict[str, int] = field(default_factory=dict)


def drop_tables(conn: Connection) -> List[str]:
     """Drop all tables, children before parents."""
     names = []
     for table in reversed(TABLE_ORDER):
          conn.execute(DropTable(table, if_exists=True))
          names.append(table.name)
     logger.info("Dropped tables: %s", ", ".join(names))
     return names


def create_tables(conn: Connection) -> List[str]:
     """Create missing tables, parents before children. Returns the tables actually created."""
     created = []
     for table in TABLE_ORDER:
          if conn.dialect.has_table(conn, table.name, schema=table.schema):
               continue
          table.create(conn)
          created.append(table.name)
     logger.info("Created tables: %s", ", ".join(created) or "(none)")
     return created


def _lookup(conn: Connection, table, key: Dict[str, Any]) -> Optional[int]:
     criteria = [table.c[column] == value for column, value in key.items()]
     return conn.execute(select(table.c.id).where(*criteria)).scalar()


def _require(conn: Connection, table, key: Dict[str, Any]) -> int:
     row_id = _lookup(conn, table, key)
     if row_id is None:
          raise BootstrapError(f"Cannot seed: required {table.name} row {key} does not exist")
     return row_id


def _insert_ignore(conn: Connection, table, key: Dict[str, Any], values: Dict[str, Any]) -> int:
     """Insert unless a row with the same natural key exists. Returns rows inserted (0 or 1)."""
     if _lookup(conn, table, key) is not None:
          return 0
     conn.execute(insert(table).values({**key, **values}))
     return 1


def _pick(row: Dict[str, Any], *columns: str) -> Dict[str, Any]:
     return {column: row[column] for column in columns}


def seed_tables(conn: Connection) -> Dict[str, int]:
     """
     Insert the demo rows from ``services.seed_data`` in dependency order.

     Returns:
          Rows inserted per table (0 for a table whose rows were all present).

     Raises:
          BootstrapError: If a row's parent cannot be found.
     """
     tables = {table.name: table for table in TABLE_ORDER}
     seeded = {name: 0 for name in tables}

     users = tables["users"]
     password_hash = hash_password(seed_data.DEMO_PASSWORD)
     for row in seed_data.USERS:
          seeded["users"] += _insert_ignore(
               conn, users, {"email": row["email"]}, {"role": row["role"], "password": password_hash}
          )

     properties = tables["properties"]
     for row in seed_data.PROPERTIES:
          owner_id = _require(conn, users, {"email": row["owner_email"]})
          values = _pick(row, "name", "city", "state", "zip", "value", "status")
          values["owner_id"] = owner_id
          seeded["properties"] += _insert_ignore(conn, properties, {"address": row["address"]}, values)

     units = tables["units"]
     for row in seed_data.UNITS:
          property_id = _require(conn, properties, {"address": row["address"]})
          seeded["units"] += _insert_ignore(
               conn,
               units,
               {"property_id": property_id, "unit_number": row["unit_number"]},
               _pick(row, "rent_amount", "status"),
          )

     tenants = tables["tenants"]
     for row in seed_data.TENANTS:
          property_id = _require(conn, properties, {"address": row["address"]})
          unit_id = _require(conn, units, {"property_id": property_id, "unit_number": row["unit_number"]})
          values = _pick(row, "name", "phone", "lease_start_date", "lease_end_date", "rent")
          values["unit_id"] = unit_id
          seeded["tenants"] += _insert_ignore(conn, tenants, {"email": row["email"]}, values)

     payments = tables["payments"]
     for row in seed_data.PAYMENTS:
          tenant_id = _require(conn, tenants, {"email": row["tenant_email"]})
          seeded["payments"] += _insert_ignore(
               conn,
               payments,
               {"tenant_id": tenant_id, "payment_date": row["payment_date"]},
               _pick(row, "amount", "status"),
          )

     maintenance = tables["maintenance"]
     for row in seed_data.MAINTENANCE:
          tenant_id = _require(conn, tenants, {"email": row["tenant_email"]})
          property_id = _require(conn, properties, {"address": row["address"]})
          values = _pick(row, "request_date", "status", "cost", "completion_date")
          values["property_id"] = property_id
          seeded["maintenance"] += _insert_ignore(
               conn, maintenance, {"tenant_id": tenant_id, "description": row["description"]}, values
          )

     associations = tables["associations"]
     for row in seed_data.ASSOCIATIONS:
          property_id = _require(conn, properties, {"address": row["address"]})
          values = _pick(row, "contact_info", "fee", "due_date")
          values["property_id"] = property_id
          seeded["associations"] += _insert_ignore(conn, associations, {"name": row["name"]}, values)

     board_members = tables["board_members"]
     for row in seed_data.BOARD_MEMBERS:
          association_id = _require(conn, associations, {"name": row["association"]})
          values = _pick(row, "name", "phone")
          values["association_id"] = association_id
          seeded["board_members"] += _insert_ignore(conn, board_members, {"email": row["email"]}, values)

     owners = tables["owners"]
     for row in seed_data.OWNERS:
          property_id = _require(conn, properties, {"address": row["address"]})
          values = _pick(row, "name", "phone")
          values["property_id"] = property_id
          seeded["owners"] += _insert_ignore(conn, owners, {"email": row["email"]}, values)

     account_types = tables["account_types"]
     for name in seed_data.ACCOUNT_TYPES:
          seeded["account_types"] += _insert_ignore(conn, account_types, {"name": name}, {})

     accounts = tables["accounts"]
     for row in seed_data.ACCOUNTS:
          account_type_id = _require(conn, account_types, {"name": row["account_type"]})
          seeded["accounts"] += _insert_ignore(
               conn, accounts, {"name": row["name"]}, {"account_type_id": account_type_id}
          )

     transaction_types = tables["transaction_types"]
     for name in seed_data.TRANSACTION_TYPES:
          seeded["transaction_types"] += _insert_ignore(conn, transaction_types, {"name": name}, {})

     transactions = tables["transactions"]
     for row in seed_data.TRANSACTIONS:
          values = _pick(row, "amount", "date")
          values["account_id"] = _require(conn, accounts, {"name": row["account"]})
          values["transaction_type_id"] = _require(conn, transaction_types, {"name": row["transaction_type"]})
          values["property_id"] = _require(conn, properties, {"address": row["address"]})
          seeded["transactions"] += _insert_ignore(
               conn, transactions, {"description": row["description"]}, values
          )

     logger.info("Seeded rows: %s", seeded)
     return seeded


def run_bootstrap(db: Database, policy: Optional[RetryPolicy] = None, reset: bool = True) -> BootstrapReport:
     """
     Bring the store to the canonical schema and demo data.

     Args:
          db: Store client
          policy: Retry policy for lock conflicts (default: 3 attempts, 1s apart)
          reset: Run the drop phase first. With ``reset=False`` existing tables
               and rows are kept and only what is missing is created/seeded.

     Raises:
          BootstrapError: On any non-retryable failure, or when lock conflicts
               persist past ``policy.max_attempts``. Nothing is committed.
     """
     policy = policy or RetryPolicy()
     report = BootstrapReport()

     def attempt() -> None:
          report.attempts += 1
          with db.engine.begin() as conn:
               report.dropped = drop_tables(conn) if reset else []
               report.created = create_tables(conn)
               report.seeded = seed_tables(conn)

     try:
          policy.run(attempt)
     except BootstrapError:
          logger.error("Bootstrap aborted and rolled back")
          raise
     except Exception as e:
          logger.error("Bootstrap failed after %d attempt(s): %s", report.attempts, e)
          raise BootstrapError(f"Bootstrap failed after {report.attempts} attempt(s): {e}") from e

     logger.info("Bootstrap complete in %d attempt(s)", report.attempts)
     return report
