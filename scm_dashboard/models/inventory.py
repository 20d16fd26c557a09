import enum


class InventoryStatus(str, enum.Enum):
    AVAILABLE = "AVAILABLE"
    RESERVED = "RESERVED"
    DAMAGED = "DAMAGED"
    EXPIRED = "EXPIRED"
    IN_TRANSIT = "IN_TRANSIT"
