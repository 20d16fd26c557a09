"""Supply chain dashboard: inventory, purchase orders and suppliers."""
__version__ = "1.0.0"
