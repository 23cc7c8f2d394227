"""Public directory schemas — only non-sensitive vendor fields."""

from vendor_portal.schemas.common import CamelModel


class DirectoryVendorOut(CamelModel):
    vendor_id: str
    legal_entity_name: str
    trade_name: str | None = None
    vendor_type: str
    business_description: str | None = None
    products_services_description: str | None = None
    website: str | None = None
    email: str
    phone_number: str | None = None
    city: str
    state: str
    country: str
    year_established: str | None = None
    employee_count: str | None = None


class DirectoryFacetsOut(CamelModel):
    states: list[str]
    vendor_types: list[str]
