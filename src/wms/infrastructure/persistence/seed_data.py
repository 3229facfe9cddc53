"""Demo records used to seed missing collections, in their stored JSON shape."""

from __future__ import annotations

DEMO_PRODUCTS: list[dict] = [
    {"id": "1", "sku": "ELEC-001", "name": "Wireless Ergonomic Mouse", "category": "Electronics",
     "quantity": 145, "unit": "pcs", "location": "WH/Stock/Row1", "price": "29.99", "cost": "12.50",
     "supplier": "TechSource Inc.", "min_level": 20},
    {"id": "2", "sku": "ELEC-002", "name": "Mechanical Keyboard RGB", "category": "Electronics",
     "quantity": 12, "unit": "pcs", "location": "WH/Stock/Row1", "price": "89.99", "cost": "45.00",
     "supplier": "TechSource Inc.", "min_level": 15},
    {"id": "3", "sku": "FURN-104", "name": "Office Chair - Mesh", "category": "Furniture",
     "quantity": 8, "unit": "pcs", "location": "WH/Stock/Row4", "price": "150.00", "cost": "80.00",
     "supplier": "FurniWorld", "min_level": 5},
    {"id": "4", "sku": "ACC-552", "name": "USB-C Hub Multiport", "category": "Accessories",
     "quantity": 300, "unit": "pcs", "location": "WH/Stock/Row2", "price": "45.00", "cost": "15.00",
     "supplier": "CableKing", "min_level": 50},
    {"id": "5", "sku": "ELEC-005", "name": "27\" 4K Monitor", "category": "Electronics",
     "quantity": 0, "unit": "pcs", "location": "WH/Stock/Row3", "price": "350.00", "cost": "210.00",
     "supplier": "ScreenMasters", "min_level": 10},
]

DEMO_OPERATIONS: list[dict] = [
    {"id": "op1", "reference": "WH/IN/00124", "type": "Receipt", "partner": "TechSource Inc.",
     "status": "Ready", "scheduled_date": "2023-10-25",
     "items": [{"product_id": "1", "quantity": 50, "done": 0}]},
    {"id": "op2", "reference": "WH/OUT/00098", "type": "Delivery", "partner": "Acme Corp",
     "status": "Ready", "scheduled_date": "2023-10-26",
     "items": [{"product_id": "2", "quantity": 2, "done": 0}]},
    {"id": "op3", "reference": "WH/INT/00033", "type": "Internal Transfer", "partner": "Internal",
     "status": "Draft", "scheduled_date": "2023-10-27",
     "items": [{"product_id": "4", "quantity": 10, "done": 0}]},
    {"id": "op4", "reference": "WH/OUT/00099", "type": "Delivery", "partner": "Globex",
     "status": "Done", "scheduled_date": "2023-10-24",
     "items": [{"product_id": "3", "quantity": 1, "done": 1}]},
]

DEMO_USERS: list[dict] = [
    {"id": "u1", "name": "Admin User", "email": "admin@nex.com", "role": "admin",
     "avatar": "AU", "password": "123"},
    {"id": "u2", "name": "Manager", "email": "manager@nex.com", "role": "manager",
     "avatar": "MG", "password": "123"},
    {"id": "u3", "name": "Worker", "email": "worker@nex.com", "role": "user",
     "avatar": "WK", "password": "123"},
]


def demo_movements(timestamp: str) -> list[dict]:
    """One opening IN movement per demo product so balances replay correctly."""
    return [
        {
            "id": f"seed-{p['id']}",
            "product_id": p["id"],
            "timestamp": timestamp,
            "kind": "IN",
            "quantity": p["quantity"],
            "reference": "Initial Inventory",
            "balance_after": p["quantity"],
            "batch_number": None,
        }
        for p in DEMO_PRODUCTS
    ]
