from sqlalchemy import Column, Integer, Numeric, Date, ForeignKey
from .base import Base, status_type
from .enums import PaymentStatus


class Payment(Base):
     """
     Payment model - rent received (or owed) from a tenant.

     Only rows with status 'paid' count towards the rent total on /reports.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     tenant_id = Column(Integer, ForeignKey("tenants.id"), nullable=False, index=True)

     amount = Column(Numeric(12, 2), nullable=False)
     payment_date = Column(Date, nullable=False)
     status = Column(
          status_type(PaymentStatus, "payment_status"),
          default=PaymentStatus.PENDING,
          server_default=PaymentStatus.PENDING.value,
          nullable=False,
          index=True,
     )

     def __repr__(self):
          return f"<Payment(id={self.id}, amount={self.amount}, status='{self.status}')>"
