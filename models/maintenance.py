from sqlalchemy import Column, Integer, Numeric, Text, Date, ForeignKey
from .base import Base, status_type
from .enums import MaintenanceStatus


class Maintenance(Base):
     """
     Maintenance model - a repair request raised by a tenant against a property.
     """
     __tablename__ = "maintenance"

     id = Column(Integer, primary_key=True, autoincrement=True)
     tenant_id = Column(Integer, ForeignKey("tenants.id"), nullable=False, index=True)
     property_id = Column(Integer, ForeignKey("properties.id"), nullable=False, index=True)

     description = Column(Text, nullable=False)
     request_date = Column(Date, nullable=False)
     status = Column(
          status_type(MaintenanceStatus, "maintenance_status"),
          default=MaintenanceStatus.PENDING,
          server_default=MaintenanceStatus.PENDING.value,
          nullable=False,
     )
     cost = Column(Numeric(12, 2), default=0, server_default="0", nullable=False)
     completion_date = Column(Date, nullable=True)

     def __repr__(self):
          return f"<Maintenance(id={self.id}, status='{self.status}')>"
