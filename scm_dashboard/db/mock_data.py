"""Seed records for the in-memory store."""
from datetime import date, datetime

PRODUCTS = [
    {"id": "prod1", "sku": "SKU-001", "name": "Industrial Sensor XL-5", "category": "Electronics", "price": 499.99, "cost": 350.00},
    {"id": "prod2", "sku": "SKU-002", "name": "Circuit Board A200", "category": "Electronics", "price": 345.00, "cost": 250.00},
    {"id": "prod3", "sku": "SKU-003", "name": "Steel Connector S-100", "category": "Hardware", "price": 25.51, "cost": 15.00},
    {"id": "prod4", "sku": "SKU-004", "name": "Temperature Controller", "category": "Electronics", "price": 129.50, "cost": 90.00},
    {"id": "prod5", "sku": "SKU-005", "name": "Power Unit P-500", "category": "Electronics", "price": 799.99, "cost": 600.00},
]

WAREHOUSES = [
    {"id": "wh1", "name": "Main Warehouse", "city": "New York", "state": "NY"},
    {"id": "wh2", "name": "West Coast Hub", "city": "Los Angeles", "state": "CA"},
]

INVENTORY = [
    {"id": "inv1", "quantity": 150, "location": "Aisle 5, Shelf B", "status": "AVAILABLE",
     "expiry_date": date(2024, 6, 15), "lot_number": "LOT-2024-001", "product_id": "prod1", "warehouse_id": "wh1"},
    {"id": "inv2", "quantity": 75, "location": "Aisle 3, Shelf A", "status": "RESERVED",
     "expiry_date": None, "lot_number": "LOT-2024-002", "product_id": "prod2", "warehouse_id": "wh2"},
    {"id": "inv3", "quantity": 25, "location": "Aisle 1, Shelf C", "status": "DAMAGED",
     "expiry_date": None, "lot_number": "LOT-2024-003", "product_id": "prod3", "warehouse_id": "wh1"},
    {"id": "inv4", "quantity": 100, "location": "Aisle 2, Shelf D", "status": "EXPIRED",
     "expiry_date": date(2024, 1, 15), "lot_number": "LOT-2023-001", "product_id": "prod4", "warehouse_id": "wh2"},
    {"id": "inv5", "quantity": 50, "location": "In Transit", "status": "IN_TRANSIT",
     "expiry_date": None, "lot_number": "LOT-2024-004", "product_id": "prod5", "warehouse_id": "wh1"},
]

SUPPLIERS = [
    {
        "id": "sup1",
        "company_name": "Tech Components Inc.",
        "contact_name": "John Smith",
        "email": "john.smith@techcomponents.com",
        "phone": "+1 (555) 123-4567",
        "address": "123 Tech Street",
        "city": "San Francisco",
        "state": "CA",
        "country": "USA",
        "postal_code": "94105",
        "tax_id": "12-3456789",
        "payment_terms": "Net 30",
        "lead_time": 5,
        "performance_rating": 4.8,
        "is_active": True,
        "latitude": 37.7897,
        "longitude": -122.3972,
    },
    {
        "id": "sup2",
        "company_name": "Global Electronics Ltd.",
        "contact_name": "Sarah Johnson",
        "email": "sarah.j@globalelectronics.com",
        "phone": "+1 (555) 987-6543",
        "address": "456 Global Ave",
        "city": "New York",
        "state": "NY",
        "country": "USA",
        "postal_code": "10001",
        "tax_id": "98-7654321",
        "payment_terms": "Net 45",
        "lead_time": 7,
        "performance_rating": 4.2,
        "is_active": True,
        "latitude": 40.7506,
        "longitude": -73.9971,
    },
    {
        "id": "sup3",
        "company_name": "Quality Parts Co.",
        "contact_name": "Michael Brown",
        "email": "michael.b@qualityparts.com",
        "phone": "+1 (555) 456-7890",
        "address": "789 Quality Blvd",
        "city": "Chicago",
        "state": "IL",
        "country": "USA",
        "postal_code": "60601",
        "tax_id": "45-6789012",
        "payment_terms": "Net 60",
        "lead_time": 10,
        "performance_rating": 3.2,
        "is_active": False,
        "latitude": 41.8781,
        "longitude": -87.6298,
    },
]

ORDERS = [
    {"id": "ord1", "order_number": "ORD-2024-001", "supplier_id": "sup1", "status": "PENDING",
     "order_date": date(2024, 3, 15), "expected_delivery_date": date(2024, 3, 30),
     "notes": "Priority order for production line",
     "items": [{"product_id": "prod1", "quantity": 50, "unit_price": 450.00}]},
    {"id": "ord2", "order_number": "ORD-2024-002", "supplier_id": "sup2", "status": "CONFIRMED",
     "order_date": date(2024, 3, 16), "expected_delivery_date": date(2024, 4, 1), "notes": None,
     "items": [{"product_id": "prod2", "quantity": 100, "unit_price": 300.00}]},
    {"id": "ord3", "order_number": "ORD-2024-003", "supplier_id": "sup3", "status": "IN_TRANSIT",
     "order_date": date(2024, 3, 10), "expected_delivery_date": date(2024, 3, 25), "notes": None,
     "items": [{"product_id": "prod3", "quantity": 500, "unit_price": 20.00}]},
    {"id": "ord4", "order_number": "ORD-2024-004", "supplier_id": "sup1", "status": "DELIVERED",
     "order_date": date(2024, 3, 1), "expected_delivery_date": date(2024, 3, 15), "notes": None,
     "items": [{"product_id": "prod4", "quantity": 75, "unit_price": 115.00}]},
    {"id": "ord5", "order_number": "ORD-2024-005", "supplier_id": "sup2", "status": "CANCELLED",
     "order_date": date(2024, 3, 5), "expected_delivery_date": date(2024, 3, 20),
     "notes": "Cancelled due to supplier stock issues",
     "items": [{"product_id": "prod5", "quantity": 25, "unit_price": 700.00}]},
]

SEEDED_AT = datetime(2024, 3, 20, 9, 0, 0)
