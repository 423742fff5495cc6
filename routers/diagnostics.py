"""
Diagnostic routes: table metadata and raw rows.

``{table}`` is validated against ``TableName``; only names from that
enumeration ever reach the store, and they select a ``Table`` object
rather than being formatted into SQL.
"""
from enum import Enum
from typing import Dict, Set

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import inspect, select
from sqlalchemy.exc import NoSuchTableError
from sqlalchemy.orm import Session

from database import get_session
from models import TABLE_ORDER


class TableName(str, Enum):
     users = "users"
     properties = "properties"
     units = "units"
     tenants = "tenants"
     payments = "payments"
     maintenance = "maintenance"
     associations = "associations"
     board_members = "board_members"
     owners = "owners"
     account_types = "account_types"
     accounts = "accounts"
     transaction_types = "transaction_types"
     transactions = "transactions"


TABLES = {table.name: table for table in TABLE_ORDER}

# Never returned by /data
HIDDEN_COLUMNS: Dict[str, Set[str]] = {"users": {"password"}}

router = APIRouter(tags=["diagnostics"])


@router.get("/schema/{table}", summary="Column metadata for a table")
def get_table_schema(table: TableName, db: Session = Depends(get_session)):
     inspector = inspect(db.get_bind())
     try:
          columns = inspector.get_columns(table.value)
          primary_key = set(inspector.get_pk_constraint(table.value).get("constrained_columns") or [])
     except NoSuchTableError:
          raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Table {table.value} does not exist")

     return [
          {
               "name": column["name"],
               "type": str(column["type"]),
               "nullable": column["nullable"],
               "default": column.get("default"),
               "primary_key": column["name"] in primary_key,
          }
          for column in columns
     ]


@router.get("/data/{table}", summary="Raw rows of a table")
def get_table_data(table: TableName, db: Session = Depends(get_session)):
     source = TABLES[table.value]
     hidden = HIDDEN_COLUMNS.get(table.value, set())
     columns = [column for column in source.columns if column.name not in hidden]
     rows = db.execute(select(*columns)).mappings().all()
     return [dict(row) for row in rows]
