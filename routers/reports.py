from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_session
from schemas.report import ReportResponse
from services.reports import build_report

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("", response_model=ReportResponse, summary="Portfolio totals")
def get_reports(db: Session = Depends(get_session)):
     """
     - **totalRent**: sum of payments with status paid (0 when there are none)
     - **totalTenants**: number of tenants
     - **totalProperties**: number of properties
     """
     return build_report(db)
