"""
Aggregate figures for the /reports endpoint.

The three numbers are read with independent queries; under concurrent
writes they may reflect different points in time.
"""
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models import Payment, PaymentStatus, Property, Tenant
from schemas.report import ReportResponse


def total_rent_collected(db: Session) -> float:
     """Sum of payment amounts with status 'paid'; 0 when there are none."""
     total = db.execute(
          select(func.coalesce(func.sum(Payment.amount), 0)).where(Payment.status == PaymentStatus.PAID)
     ).scalar()
     return float(total or 0)


def count_rows(db: Session, model) -> int:
     return db.execute(select(func.count()).select_from(model)).scalar() or 0


def build_report(db: Session) -> ReportResponse:
     return ReportResponse(
          total_rent=total_rent_collected(db),
          total_tenants=count_rows(db, Tenant),
          total_properties=count_rows(db, Property),
     )
