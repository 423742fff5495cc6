"""
Pydantic schemas for the property ledger: account types, accounts,
transaction types and transactions.

List responses embed the related rows (an account carries its type, a
transaction carries its account, type and property) so a client can render
a ledger without follow-up requests.
"""
import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from models.enums import PropertyStatus


class AccountTypeCreate(BaseModel):
     """Request body for POST /account-types. Names are unique."""
     name: str = Field(..., min_length=1, max_length=100)


class AccountTypeResponse(AccountTypeCreate):
     id: int

     model_config = ConfigDict(from_attributes=True)


class AccountCreate(BaseModel):
     """Request body for POST /accounts."""
     name: str = Field(..., min_length=1, max_length=255)
     account_type_id: int = Field(..., description="Account type ID (must exist)")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "name": "Rent Income",
                    "account_type_id": 3,
               }
          }
     )


class AccountResponse(AccountCreate):
     id: int
     account_type: Optional[AccountTypeResponse] = None

     model_config = ConfigDict(from_attributes=True)


class TransactionTypeCreate(BaseModel):
     """Request body for POST /transaction-types. Names are unique."""
     name: str = Field(..., min_length=1, max_length=100)


class TransactionTypeResponse(TransactionTypeCreate):
     id: int

     model_config = ConfigDict(from_attributes=True)


class TransactionProperty(BaseModel):
     """The property a transaction is assigned to, as embedded in transaction listings."""
     id: int
     name: Optional[str] = None
     address: str
     status: PropertyStatus

     model_config = ConfigDict(from_attributes=True)


class TransactionCreate(BaseModel):
     """Request body for POST /transactions."""
     amount: float
     date: datetime.date
     description: Optional[str] = Field(None, max_length=255)
     account_id: int = Field(..., description="Account ID (must exist)")
     transaction_type_id: int = Field(..., description="Transaction type ID (must exist)")
     property_id: int = Field(..., description="Property ID (must exist)")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "amount": 1500.00,
                    "date": "2025-02-01",
                    "description": "February rent, unit 1A",
                    "account_id": 1,
                    "transaction_type_id": 1,
                    "property_id": 1,
               }
          }
     )


class TransactionResponse(TransactionCreate):
     id: int
     account: Optional[AccountResponse] = None
     transaction_type: Optional[TransactionTypeResponse] = None
     property: Optional[TransactionProperty] = None

     model_config = ConfigDict(from_attributes=True)
