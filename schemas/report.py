from pydantic import BaseModel, Field, ConfigDict


class ReportResponse(BaseModel):
     """Response for GET /reports. Serialized with camelCase keys."""

     total_rent: float = Field(..., alias="totalRent", description="Sum of paid payment amounts")
     total_tenants: int = Field(..., alias="totalTenants")
     total_properties: int = Field(..., alias="totalProperties")

     model_config = ConfigDict(
          populate_by_name=True,
          json_schema_extra={
               "example": {
                    "totalRent": 3100.00,
                    "totalTenants": 2,
                    "totalProperties": 2,
               }
          },
     )
