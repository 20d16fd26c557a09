"""Badge metadata and formatting helpers, independent of any UI toolkit."""
import enum
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, List, Optional, Tuple, Union

from scm_dashboard.models.inventory import InventoryStatus
from scm_dashboard.models.order import OrderStatus
from scm_dashboard.models.supplier import PerformanceBucket, performance_bucket


@dataclass(frozen=True)
class Badge:
    variant: str  # default | secondary | outline | success | warning | destructive
    label: str


INVENTORY_STATUS_BADGES = {
    InventoryStatus.AVAILABLE: Badge("success", "Available"),
    InventoryStatus.RESERVED: Badge("warning", "Reserved"),
    InventoryStatus.DAMAGED: Badge("destructive", "Damaged"),
    InventoryStatus.EXPIRED: Badge("destructive", "Expired"),
    InventoryStatus.IN_TRANSIT: Badge("secondary", "In Transit"),
}

ORDER_STATUS_BADGES = {
    OrderStatus.PENDING: Badge("warning", "Pending"),
    OrderStatus.CONFIRMED: Badge("secondary", "Confirmed"),
    OrderStatus.IN_TRANSIT: Badge("default", "In Transit"),
    OrderStatus.DELIVERED: Badge("success", "Delivered"),
    OrderStatus.CANCELLED: Badge("destructive", "Cancelled"),
}

ACTIVITY_BADGES = {
    True: Badge("success", "Active"),
    False: Badge("secondary", "Inactive"),
}

PERFORMANCE_VARIANTS = {
    PerformanceBucket.HIGH: "success",
    PerformanceBucket.MEDIUM: "warning",
    PerformanceBucket.LOW: "destructive",
}


def inventory_status_badge(status: Union[InventoryStatus, str]) -> Badge:
    return INVENTORY_STATUS_BADGES[InventoryStatus(status)]


def order_status_badge(status: Union[OrderStatus, str]) -> Badge:
    return ORDER_STATUS_BADGES[OrderStatus(status)]


def activity_badge(is_active: bool) -> Badge:
    return ACTIVITY_BADGES[bool(is_active)]


def performance_badge(rating: float) -> Badge:
    return Badge(PERFORMANCE_VARIANTS[performance_bucket(rating)], f"{rating:.1f}")


def status_option_label(value: str) -> str:
    """IN_TRANSIT -> 'IN TRANSIT' for select options"""
    return value.replace("_", " ")


def format_currency(amount: float) -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_date(value: Optional[Union[date, datetime]], empty: str = "N/A") -> str:
    """March 5, 2024"""
    if value is None:
        return empty
    return f"{value.strftime('%B')} {value.day}, {value.year}"


def format_short_date(value: Optional[Union[date, datetime]], empty: str = "N/A") -> str:
    """Mar 5, 2024"""
    if value is None:
        return empty
    return f"{value.strftime('%b')} {value.day}, {value.year}"


def status_options(statuses: Iterable[enum.Enum]) -> List[Tuple[str, str]]:
    """(value, label) pairs for a status select"""
    return [(status.value, status_option_label(status.value)) for status in statuses]
