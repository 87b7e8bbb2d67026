"""Customer use cases"""
from .search_customers import SearchCustomers
from .list_customers import ListCustomers
from .create_customer import CreateCustomer
from .update_customer import UpdateCustomer
from .dtos import CustomerCommandDTO, CustomerResponseDTO

__all__ = [
    "SearchCustomers",
    "ListCustomers",
    "CreateCustomer",
    "UpdateCustomer",
    "CustomerCommandDTO",
    "CustomerResponseDTO",
]
