"""
Ledger routes: account types, accounts, transaction types and transactions.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from models import Account, AccountType, Transaction, TransactionType
from routers.records import create_record, list_records
from schemas.ledger import (
     AccountCreate,
     AccountResponse,
     AccountTypeCreate,
     AccountTypeResponse,
     TransactionCreate,
     TransactionResponse,
     TransactionTypeCreate,
     TransactionTypeResponse,
)

account_types_router = APIRouter(prefix="/account-types", tags=["ledger"])
accounts_router = APIRouter(prefix="/accounts", tags=["ledger"])
transaction_types_router = APIRouter(prefix="/transaction-types", tags=["ledger"])
transactions_router = APIRouter(prefix="/transactions", tags=["ledger"])


@account_types_router.get("", response_model=List[AccountTypeResponse], summary="List account types")
def list_account_types(db: Session = Depends(get_session)):
     return list_records(db, AccountType)


@account_types_router.post(
     "",
     response_model=AccountTypeResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create an account type",
)
def create_account_type(body: AccountTypeCreate, db: Session = Depends(get_session)):
     return create_record(db, AccountType, body)


@accounts_router.get("", response_model=List[AccountResponse], summary="List accounts with their type")
def list_accounts(db: Session = Depends(get_session)):
     return list_records(db, Account)


@accounts_router.post(
     "",
     response_model=AccountResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a ledger account",
)
def create_account(body: AccountCreate, db: Session = Depends(get_session)):
     return create_record(db, Account, body)


@transaction_types_router.get("", response_model=List[TransactionTypeResponse], summary="List transaction types")
def list_transaction_types(db: Session = Depends(get_session)):
     return list_records(db, TransactionType)


@transaction_types_router.post(
     "",
     response_model=TransactionTypeResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a transaction type",
)
def create_transaction_type(body: TransactionTypeCreate, db: Session = Depends(get_session)):
     return create_record(db, TransactionType, body)


@transactions_router.get("", response_model=List[TransactionResponse], summary="List ledger transactions")
def list_transactions(db: Session = Depends(get_session)):
     """
     Each transaction embeds:
     - **account** (with its **account_type**)
     - **transaction_type**
     - **property**
     """
     return list_records(db, Transaction)


@transactions_router.post(
     "",
     response_model=TransactionResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Record a ledger transaction",
)
def create_transaction(body: TransactionCreate, db: Session = Depends(get_session)):
     return create_record(db, Transaction, body)
