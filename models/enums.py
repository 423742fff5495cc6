import enum


class UserRole(str, enum.Enum):
     OWNER = "owner"
     MANAGER = "manager"
     TENANT = "tenant"


class UnitStatus(str, enum.Enum):
     OCCUPIED = "occupied"
     VACANT = "vacant"


class PaymentStatus(str, enum.Enum):
     PAID = "paid"
     LATE = "late"
     PENDING = "pending"


class MaintenanceStatus(str, enum.Enum):
     PENDING = "pending"
     IN_PROGRESS = "in-progress"
     COMPLETED = "completed"


class PropertyStatus(str, enum.Enum):
     ACTIVE = "active"
     INACTIVE = "inactive"
