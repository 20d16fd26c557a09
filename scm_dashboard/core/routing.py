import logging
from typing import List, Optional

logger = logging.getLogger(__name__)

DASHBOARD_PATH = "/dashboard"

INVENTORY = "inventory"
ORDERS = "orders"
SUPPLIERS = "suppliers"
MODULES = (INVENTORY, ORDERS, SUPPLIERS)


def list_path(module: str) -> str:
    return f"{DASHBOARD_PATH}/{module}"


def detail_path(module: str, identity: str) -> str:
    return f"{DASHBOARD_PATH}/{module}/{identity}"


def new_path(module: str) -> str:
    return f"{DASHBOARD_PATH}/{module}/new"


class Router:
    """Client-side navigation history"""

    def __init__(self, initial_path: str = DASHBOARD_PATH):
        self.history: List[str] = [initial_path]

    @property
    def current_path(self) -> str:
        return self.history[-1]

    def push(self, path: str):
        logger.info(f"Navigating to {path}")
        self.history.append(path)

    def back(self) -> Optional[str]:
        if len(self.history) > 1:
            self.history.pop()
        return self.current_path
