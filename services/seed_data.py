"""
Canonical demo rows inserted by the bootstrapper.

Parents are referenced by natural key (user email, property address, ...)
rather than by id, so the rows can be resolved against whatever ids the
store hands out.
"""
from datetime import date

DEMO_PASSWORD = "password123"

USERS = [
     {"email": "owner@example.com", "role": "owner"},
     {"email": "manager@example.com", "role": "manager"},
     {"email": "tenant@example.com", "role": "tenant"},
]

PROPERTIES = [
     {
          "owner_email": "owner@example.com",
          "name": "Main St Property",
          "address": "123 Main St",
          "city": "Springfield",
          "state": "IL",
          "zip": "62701",
          "value": 350000,
          "status": "active",
     },
     {
          "owner_email": "owner@example.com",
          "name": "Oak Ave Property",
          "address": "456 Oak Ave",
          "city": "Springfield",
          "state": "IL",
          "zip": "62702",
          "value": 425000,
          "status": "active",
     },
]

UNITS = [
     {"address": "123 Main St", "unit_number": "1A", "rent_amount": 1500, "status": "occupied"},
     {"address": "123 Main St", "unit_number": "1B", "rent_amount": 1400, "status": "vacant"},
     {"address": "456 Oak Ave", "unit_number": "101", "rent_amount": 1600, "status": "occupied"},
]

TENANTS = [
     {
          "address": "123 Main St",
          "unit_number": "1A",
          "name": "John Doe",
          "email": "john.doe@example.com",
          "phone": "555-0101",
          "lease_start_date": date(2025, 1, 1),
          "lease_end_date": date(2025, 12, 31),
          "rent": 1500,
     },
     {
          "address": "456 Oak Ave",
          "unit_number": "101",
          "name": "Jane Smith",
          "email": "jane.smith@example.com",
          "phone": "555-0102",
          "lease_start_date": date(2025, 2, 1),
          "lease_end_date": date(2026, 1, 31),
          "rent": 1600,
     },
]

PAYMENTS = [
     {"tenant_email": "john.doe@example.com", "amount": 1500, "payment_date": date(2025, 2, 1), "status": "paid"},
     {"tenant_email": "jane.smith@example.com", "amount": 1600, "payment_date": date(2025, 2, 1), "status": "paid"},
     {"tenant_email": "john.doe@example.com", "amount": 300, "payment_date": date(2025, 3, 1), "status": "pending"},
]

MAINTENANCE = [
     {
          "tenant_email": "john.doe@example.com",
          "address": "123 Main St",
          "description": "Leaking kitchen faucet",
          "request_date": date(2025, 2, 10),
          "status": "completed",
          "cost": 120,
          "completion_date": date(2025, 2, 12),
     },
     {
          "tenant_email": "jane.smith@example.com",
          "address": "456 Oak Ave",
          "description": "Heater not working",
          "request_date": date(2025, 3, 5),
          "status": "pending",
          "cost": 0,
          "completion_date": None,
     },
]

ASSOCIATIONS = [
     {
          "address": "123 Main St",
          "name": "Main Street HOA",
          "contact_info": "board@mainstreethoa.example.com",
          "fee": 250,
          "due_date": date(2025, 4, 1),
     },
     {
          "address": "456 Oak Ave",
          "name": "Oak Avenue HOA",
          "contact_info": "555-0200",
          "fee": 300,
          "due_date": date(2025, 4, 15),
     },
]

BOARD_MEMBERS = [
     {"association": "Main Street HOA", "name": "Alice Brown", "email": "alice.brown@example.com", "phone": "555-0301"},
     {"association": "Oak Avenue HOA", "name": "Bob Green", "email": "bob.green@example.com", "phone": "555-0302"},
]

OWNERS = [
     {"address": "123 Main St", "name": "Olivia Owner", "email": "olivia.owner@example.com", "phone": "555-0401"},
     {"address": "456 Oak Ave", "name": "Oscar Owner", "email": "oscar.owner@example.com", "phone": "555-0402"},
]

ACCOUNT_TYPES = ["Asset", "Liability", "Income", "Expense"]

TRANSACTION_TYPES = ["Income", "Expense", "Transfer"]

ACCOUNTS = [
     {"name": "Rent Income", "account_type": "Income"},
     {"name": "Maintenance Expense", "account_type": "Expense"},
]

TRANSACTIONS = [
     {
          "account": "Rent Income",
          "transaction_type": "Income",
          "address": "123 Main St",
          "amount": 1500,
          "date": date(2025, 2, 1),
          "description": "February rent, unit 1A",
     },
     {
          "account": "Maintenance Expense",
          "transaction_type": "Expense",
          "address": "123 Main St",
          "amount": 120,
          "date": date(2025, 2, 12),
          "description": "Kitchen faucet repair, unit 1A",
     },
]
