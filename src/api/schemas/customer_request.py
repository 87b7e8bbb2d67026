"""Request schemas for Customer API"""

from typing import Optional
from pydantic import BaseModel, Field


class CustomerRequestSchema(BaseModel):
    """
    Request schema for creating or updating a customer

    Used for POST /customers and PUT /customers/{customer_id}.
    """

    name: str = Field(..., max_length=200, description="Customer name (required)")
    phone: Optional[str] = Field(default=None, max_length=30)
    address: Optional[str] = Field(default=None, max_length=500)

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Ramesh Traders",
                "phone": "9800000000",
                "address": "12 Market Road",
            }
        }
