from pydantic import BaseModel

ALL = "all"


class InventoryFilters(BaseModel):
    search_query: str = ""
    status_filter: str = ALL
    warehouse_filter: str = ALL


class OrderFilters(BaseModel):
    search_query: str = ""
    status_filter: str = ALL
    supplier_filter: str = ALL


class SupplierFilters(BaseModel):
    search_query: str = ""
    status_filter: str = ALL        # all | active | inactive
    location_filter: str = ALL      # supplier state
    performance_filter: str = ALL   # all | high | medium | low
