from sqlalchemy import Column, Integer, String, Numeric, Date, ForeignKey, CheckConstraint
from .base import Base


class Tenant(Base):
     """
     Tenant model - the occupant of a unit for the duration of a lease.
     """
     __table_args__ = (
          CheckConstraint("lease_start_date <= lease_end_date", name="ck_tenants_lease_dates"),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)
     unit_id = Column(Integer, ForeignKey("units.id"), nullable=False, index=True)

     # Personal info
     name = Column(String(200), nullable=False)
     email = Column(String(255), nullable=True)
     phone = Column(String(50), nullable=True)

     # Lease period
     lease_start_date = Column(Date, nullable=False)
     lease_end_date = Column(Date, nullable=False)
     rent = Column(Numeric(12, 2), nullable=False)

     def __repr__(self):
          return f"<Tenant(id={self.id}, name='{self.name}')>"
