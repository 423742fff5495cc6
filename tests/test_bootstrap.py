"""
Schema bootstrap: ordering, idempotence, seeding and lock-conflict retries.
"""
import re
from datetime import date

import pytest
from sqlalchemy import event, func, select
from sqlalchemy.exc import OperationalError, ProgrammingError

import services.bootstrap as bootstrap_module
from models import TABLE_ORDER, Payment, User
from services import seed_data
from services.bootstrap import (
     BootstrapError,
     RetryPolicy,
     create_tables,
     is_lock_conflict,
     run_bootstrap,
)

TABLE_NAMES = [table.name for table in TABLE_ORDER]


def _row_counts(db):
     with db.engine.connect() as conn:
          return {
               table.name: conn.execute(select(func.count()).select_from(table)).scalar()
               for table in TABLE_ORDER
          }


def _deadlock():
     return OperationalError("DROP TABLE IF EXISTS owners", {}, Exception("deadlock detected"))


def _no_wait(policy_sleeps):
     return RetryPolicy(max_attempts=3, delay=0.5, sleep=policy_sleeps.append)


# ---------------------------------------------------------------------------
# Idempotence
# ---------------------------------------------------------------------------

class TestIdempotentBootstrap:

     def test_first_run_creates_and_seeds_every_table(self, db):
          report = run_bootstrap(db, RetryPolicy(delay=0))

          assert report.attempts == 1
          assert report.created == TABLE_NAMES
          assert all(report.seeded[name] > 0 for name in TABLE_NAMES)
          assert _row_counts(db) == report.seeded

     def test_second_run_with_reset_yields_same_rows(self, db):
          run_bootstrap(db, RetryPolicy(delay=0))
          first = _row_counts(db)

          report = run_bootstrap(db, RetryPolicy(delay=0))

          assert report.dropped == list(reversed(TABLE_NAMES))
          assert _row_counts(db) == first

     def test_second_run_without_reset_inserts_nothing(self, db):
          run_bootstrap(db, RetryPolicy(delay=0))
          first = _row_counts(db)

          report = run_bootstrap(db, RetryPolicy(delay=0), reset=False)

          assert report.dropped == []
          assert report.created == []
          assert sum(report.seeded.values()) == 0
          assert _row_counts(db) == first

     def test_reset_false_keeps_rows_added_after_bootstrap(self, db):
          run_bootstrap(db, RetryPolicy(delay=0))
          with db.session() as session:
               session.add(User(email="extra@example.com", password="x", role="manager"))

          run_bootstrap(db, RetryPolicy(delay=0), reset=False)

          with db.session() as session:
               assert session.query(User).filter(User.email == "extra@example.com").count() == 1

     def test_seeded_passwords_are_hashed(self, db):
          run_bootstrap(db, RetryPolicy(delay=0))
          with db.session() as session:
               user = session.query(User).filter(User.email == "owner@example.com").one()
          assert user.password != seed_data.DEMO_PASSWORD
          assert user.password.startswith("$2")


# ---------------------------------------------------------------------------
# Dependency ordering
# ---------------------------------------------------------------------------

class TestDependencyOrder:

     def test_drops_children_first_and_creates_parents_first(self, db):
          run_bootstrap(db, RetryPolicy(delay=0))
          statements = []

          @event.listens_for(db.engine, "before_cursor_execute")
          def record(conn, cursor, statement, parameters, context, executemany):
               statements.append(statement)

          run_bootstrap(db, RetryPolicy(delay=0))

          dropped = [m.group(1) for s in statements for m in [re.search(r"DROP TABLE IF EXISTS (\w+)", s)] if m]
          created = [m.group(1) for s in statements for m in [re.match(r"\s*CREATE TABLE (\w+)", s)] if m]
          assert dropped == list(reversed(TABLE_NAMES))
          assert created == TABLE_NAMES

     def test_every_foreign_key_points_backwards(self):
          seen = set()
          for table in TABLE_ORDER:
               for fk in table.foreign_keys:
                    assert fk.column.table.name in seen, f"{table.name} references {fk.column.table.name}"
               seen.add(table.name)

     def test_create_tables_skips_existing(self, db):
          with db.engine.begin() as conn:
               assert create_tables(conn) == TABLE_NAMES
          with db.engine.begin() as conn:
               assert create_tables(conn) == []


# ---------------------------------------------------------------------------
# Seeding
# ---------------------------------------------------------------------------

class TestSeeding:

     def test_missing_parent_is_fatal(self, db, monkeypatch):
          monkeypatch.setattr(seed_data, "PROPERTIES", [
               {
                    "owner_email": "nobody@example.com",
                    "address": "1 Nowhere Rd",
                    "city": None,
                    "state": None,
                    "zip": None,
                    "value": 1,
               }
          ])

          with pytest.raises(BootstrapError, match="users"):
               run_bootstrap(db, RetryPolicy(delay=0))

     def test_account_with_unknown_type_is_fatal(self, db, monkeypatch):
          monkeypatch.setattr(seed_data, "ACCOUNTS", [{"name": "Suspense", "account_type": "Equity"}])

          with pytest.raises(BootstrapError, match="account_types"):
               run_bootstrap(db, RetryPolicy(delay=0))

     def test_failed_rerun_leaves_previous_data_in_place(self, db, monkeypatch):
          run_bootstrap(db, RetryPolicy(delay=0))
          before = _row_counts(db)

          monkeypatch.setattr(seed_data, "OWNERS", [
               {"address": "1 Nowhere Rd", "name": "Nobody", "email": "nobody@example.com", "phone": None}
          ])
          with pytest.raises(BootstrapError, match="properties"):
               run_bootstrap(db, RetryPolicy(delay=0))

          # The drop and create phases are rolled back together with the seed rows
          assert _row_counts(db) == before

     def test_failed_first_run_leaves_no_tables(self, db, monkeypatch):
          monkeypatch.setattr(seed_data, "TRANSACTIONS", [
               {
                    "account": "No Such Account",
                    "transaction_type": "Income",
                    "address": "123 Main St",
                    "amount": 1,
                    "date": date(2025, 1, 1),
                    "description": "Unbookable",
               }
          ])
          with pytest.raises(BootstrapError):
               run_bootstrap(db, RetryPolicy(delay=0))

          with db.engine.connect() as conn:
               assert [t.name for t in TABLE_ORDER if conn.dialect.has_table(conn, t.name)] == []

     def test_seed_payments_include_paid_and_pending(self, db):
          run_bootstrap(db, RetryPolicy(delay=0))
          with db.session() as session:
               statuses = sorted(p.status.value for p in session.query(Payment).all())
          assert statuses == ["paid", "paid", "pending"]


# ---------------------------------------------------------------------------
# Lock conflicts and retries
# ---------------------------------------------------------------------------

class TestRetry:

     def test_deadlock_during_drop_is_retried(self, db, monkeypatch):
          real_drop = bootstrap_module.drop_tables
          calls = []

          def flaky_drop(conn):
               calls.append(1)
               if len(calls) == 1:
                    raise _deadlock()
               return real_drop(conn)

          monkeypatch.setattr(bootstrap_module, "drop_tables", flaky_drop)
          sleeps = []

          report = run_bootstrap(db, _no_wait(sleeps))

          assert report.attempts == 2
          assert sleeps == [0.5]
          assert _row_counts(db)["users"] == len(seed_data.USERS)

     def test_persistent_deadlock_gives_up_after_max_attempts(self, db, monkeypatch):
          def always_deadlocked(conn):
               raise _deadlock()

          monkeypatch.setattr(bootstrap_module, "drop_tables", always_deadlocked)
          sleeps = []

          with pytest.raises(BootstrapError, match="3 attempt"):
               run_bootstrap(db, _no_wait(sleeps))
          assert len(sleeps) == 2

     def test_other_store_errors_are_not_retried(self, db, monkeypatch):
          def broken(conn):
               raise ProgrammingError("CREATE TABLE", {}, Exception("syntax error near CHECK"))

          monkeypatch.setattr(bootstrap_module, "create_tables", broken)
          sleeps = []

          with pytest.raises(BootstrapError) as excinfo:
               run_bootstrap(db, _no_wait(sleeps))
          assert sleeps == []
          assert isinstance(excinfo.value.__cause__, ProgrammingError)


class TestRetryPolicy:

     def test_backoff_multiplies_delay(self):
          sleeps = []
          attempts = []

          def fn():
               attempts.append(1)
               if len(attempts) < 3:
                    raise _deadlock()
               return "done"

          policy = RetryPolicy(max_attempts=3, delay=1.0, backoff=2.0, sleep=sleeps.append)
          assert policy.run(fn) == "done"
          assert sleeps == [1.0, 2.0]

     def test_custom_predicate(self):
          calls = []

          def fn():
               calls.append(1)
               raise ValueError("nope")

          policy = RetryPolicy(max_attempts=3, delay=0, retryable=lambda e: isinstance(e, KeyError), sleep=lambda s: None)
          with pytest.raises(ValueError):
               policy.run(fn)
          assert len(calls) == 1

     def test_from_settings(self, settings):
          policy = RetryPolicy.from_settings(settings)
          assert policy.max_attempts == settings.bootstrap_max_attempts
          assert policy.delay == 0
          assert policy.backoff == 1.0


class _PgError(Exception):
     pgcode = "40P01"


class TestIsLockConflict:

     @pytest.mark.parametrize("orig", [
          Exception("deadlock detected"),
          Exception("database is locked"),
          Exception(1205, b"Transaction was deadlocked on lock resources"),
          _PgError("could not obtain lock"),
     ])
     def test_lock_conflicts(self, orig):
          assert is_lock_conflict(OperationalError("DROP TABLE x", {}, orig))

     def test_other_errors(self):
          assert not is_lock_conflict(OperationalError("SELECT 1", {}, Exception("connection refused")))
          assert not is_lock_conflict(ValueError("deadlock"))
