"""Data Transfer Objects for Customer Use Cases"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from src.domain.customer import Customer


class CustomerCommandDTO(BaseModel):
    """Command DTO for creating or updating a customer"""

    name: str = Field(..., max_length=200)
    phone: Optional[str] = Field(default=None, max_length=30)
    address: Optional[str] = Field(default=None, max_length=500)


class CustomerResponseDTO(BaseModel):
    id: int
    name: str
    phone: Optional[str] = None
    address: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerResponseDTO":
        return cls(
            id=customer.id,
            name=customer.name,
            phone=customer.phone,
            address=customer.address,
            created_at=customer.created_at,
            updated_at=customer.updated_at,
        )
