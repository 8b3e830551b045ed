"""
The admin console's in-memory mock collections, as raw camelCase records
exactly as each page holds them.
"""

from .schemas import ReportDataset

PRODUCTS = [
    {"id": "PRD-001", "name": "Wireless Headphones", "category": "Electronics", "price": 79.99, "stock": 45},
    {"id": "PRD-002", "name": "Smart Watch", "category": "Electronics", "price": 129.99, "stock": 32},
    {"id": "PRD-003", "name": "Office Chair", "category": "Furniture", "price": 189.99, "stock": 18},
    {"id": "PRD-004", "name": "Organic Apples (5lb)", "category": "Groceries", "price": 4.99, "stock": 120},
    {"id": "PRD-005", "name": "Cotton T-shirt", "category": "Clothing", "price": 24.99, "stock": 78},
    {"id": "PRD-006", "name": "Stainless Steel Water Bottle", "category": "Kitchen", "price": 19.99, "stock": 54},
    {"id": "PRD-007", "name": "Yoga Mat", "category": "Sports", "price": 29.99, "stock": 25},
    {"id": "PRD-008", "name": "LED Desk Lamp", "category": "Electronics", "price": 34.99, "stock": 42},
    {"id": "PRD-009", "name": "Ergonomic Keyboard", "category": "Electronics", "price": 89.99, "stock": 23},
    {"id": "PRD-010", "name": "Bluetooth Speaker", "category": "Electronics", "price": 59.99, "stock": 38},
    {"id": "PRD-011", "name": "Sectional Sofa", "category": "Furniture", "price": 799.99, "stock": 8},
    {"id": "PRD-012", "name": "Coffee Table", "category": "Furniture", "price": 249.99, "stock": 15},
    {"id": "PRD-013", "name": "Organic Bananas (bunch)", "category": "Groceries", "price": 2.49, "stock": 150},
    {"id": "PRD-014", "name": "Fresh Avocados (3pk)", "category": "Groceries", "price": 5.99, "stock": 85},
    {"id": "PRD-015", "name": "Designer Jeans", "category": "Clothing", "price": 69.99, "stock": 42},
    {"id": "PRD-016", "name": "Wool Sweater", "category": "Clothing", "price": 49.99, "stock": 31},
    {"id": "PRD-017", "name": "Non-stick Cookware Set", "category": "Kitchen", "price": 129.99, "stock": 19},
    {"id": "PRD-018", "name": "Chef's Knife", "category": "Kitchen", "price": 79.99, "stock": 27},
    {"id": "PRD-019", "name": "Tennis Racket", "category": "Sports", "price": 89.99, "stock": 16},
    {"id": "PRD-020", "name": "Running Shoes", "category": "Sports", "price": 119.99, "stock": 36},
]

INVENTORY = [
    {"id": "INV-001", "category": "Electronics", "quantity": 150, "status": "In Stock", "lastUpdated": "2024-01-20 14:30"},
    {"id": "INV-002", "category": "Furniture", "quantity": 18, "status": "Low Stock", "lastUpdated": "2024-01-19 09:15"},
    {"id": "INV-003", "category": "Clothing", "quantity": 200, "status": "In Stock", "lastUpdated": "2024-01-21 11:45"},
    {"id": "INV-004", "category": "Books", "quantity": 320, "status": "In Stock", "lastUpdated": "2024-01-22 13:20"},
    {"id": "INV-005", "category": "Sports", "quantity": 25, "status": "Low Stock", "lastUpdated": "2024-01-23 15:10"},
    {"id": "INV-006", "category": "Home Decor", "quantity": 0, "status": "Out of Stock", "lastUpdated": "2024-01-24 16:45"},
    {"id": "INV-007", "category": "Toys", "quantity": 180, "status": "In Stock", "lastUpdated": "2024-01-25 10:30"},
    {"id": "INV-008", "category": "Beauty", "quantity": 20, "status": "Low Stock", "lastUpdated": "2024-01-26 12:15"},
    {"id": "INV-009", "category": "Automotive", "quantity": 60, "status": "In Stock", "lastUpdated": "2024-01-27 14:30"},
    {"id": "INV-010", "category": "Garden", "quantity": 85, "status": "In Stock", "lastUpdated": "2024-01-28 09:25"},
]

CATEGORIES = [
    {"id": "CAT-001", "name": "Electronics", "description": "Electronic devices and accessories", "createdOn": "2024-01-15", "items": 150},
    {"id": "CAT-002", "name": "Furniture", "description": "Home and office furniture", "createdOn": "2024-01-16", "items": 75},
    {"id": "CAT-003", "name": "Clothing", "description": "Apparel and accessories", "createdOn": "2024-01-17", "items": 200},
    {"id": "CAT-004", "name": "Books", "description": "Books and publications", "createdOn": "2024-01-18", "items": 320},
    {"id": "CAT-005", "name": "Sports", "description": "Sports equipment and gear", "createdOn": "2024-01-19", "items": 100},
    {"id": "CAT-006", "name": "Home Decor", "description": "Decorative items for home", "createdOn": "2024-01-20", "items": 120},
    {"id": "CAT-007", "name": "Toys", "description": "Children's toys and games", "createdOn": "2024-01-21", "items": 180},
    {"id": "CAT-008", "name": "Beauty", "description": "Beauty and personal care products", "createdOn": "2024-01-22", "items": 90},
    {"id": "CAT-009", "name": "Automotive", "description": "Car parts and accessories", "createdOn": "2024-01-23", "items": 60},
    {"id": "CAT-010", "name": "Garden", "description": "Garden tools and supplies", "createdOn": "2024-01-24", "items": 85},
]

SUPPLIERS = [
    {"id": "SUP-001", "name": "Tech Supplies Co.", "location": {"city": "San Francisco", "state": "California", "zipCode": "94105", "country": "US"}, "activeOrders": 5},
    {"id": "SUP-002", "name": "Global Electronics", "location": {"city": "New York City", "state": "New York", "zipCode": "10001", "country": "US"}, "activeOrders": 8},
    {"id": "SUP-003", "name": "Quality Distributors", "location": {"city": "Houston", "state": "Texas", "zipCode": "77001", "country": "US"}, "activeOrders": 7},
    {"id": "SUP-004", "name": "Prime Components", "location": {"city": "Chicago", "state": "Illinois", "zipCode": "60601", "country": "US"}, "activeOrders": 4},
    {"id": "SUP-005", "name": "West Coast Supply", "location": {"city": "Seattle", "state": "Washington", "zipCode": "98101", "country": "US"}, "activeOrders": 6},
    {"id": "SUP-006", "name": "Southern Wholesale", "location": {"city": "Miami", "state": "Florida", "zipCode": "33101", "country": "US"}, "activeOrders": 2},
    {"id": "SUP-007", "name": "Midwest Suppliers", "location": {"city": "Detroit", "state": "Michigan", "zipCode": "48201", "country": "US"}, "activeOrders": 8},
    {"id": "SUP-008", "name": "East Coast Logistics", "location": {"city": "Boston", "state": "Massachusetts", "zipCode": "02101", "country": "US"}, "activeOrders": 5},
    {"id": "SUP-009", "name": "Desert Distribution", "location": {"city": "Phoenix", "state": "Arizona", "zipCode": "85001", "country": "US"}, "activeOrders": 3},
    {"id": "SUP-010", "name": "Mountain Supply Co", "location": {"city": "Denver", "state": "Colorado", "zipCode": "80201", "country": "US"}, "activeOrders": 4},
]

ORDERS = [
    {"id": "ORD-001", "date": "2025-05-01", "status": "Completed", "total": 1200.00},
    {"id": "ORD-002", "date": "2025-04-30", "status": "Processing", "total": 799.99},
    {"id": "ORD-003", "date": "2025-04-29", "status": "Pending", "total": 145.97},
    {"id": "ORD-004", "date": "2025-04-28", "status": "Completed", "total": 599.98},
    {"id": "ORD-005", "date": "2025-04-27", "status": "Processing", "total": 89.99},
    {"id": "ORD-006", "date": "2025-04-26", "status": "Completed", "total": 299.97},
    {"id": "ORD-007", "date": "2025-04-25", "status": "Pending", "total": 1499.99},
    {"id": "ORD-008", "date": "2025-04-24", "status": "Processing", "total": 499.98},
    {"id": "ORD-009", "date": "2025-04-23", "status": "Completed", "total": 149.99},
    {"id": "ORD-010", "date": "2025-04-22", "status": "Pending", "total": 999.99},
    {"id": "ORD-011", "date": "2025-04-21", "status": "Completed", "total": 450.50},
    {"id": "ORD-012", "date": "2025-04-20", "status": "Processing", "total": 1275.25},
    {"id": "ORD-013", "date": "2025-04-19", "status": "Completed", "total": 675.40},
    {"id": "ORD-014", "date": "2025-04-18", "status": "Pending", "total": 320.15},
    {"id": "ORD-015", "date": "2025-04-17", "status": "Processing", "total": 890.75},
]

WAREHOUSES = [
    {"id": "WH-001", "location": {"city": "Los Angeles", "state": "California", "zipCode": "90001"}, "managedBy": "John Doe", "capacity": {"used": 7500, "total": 10000}},
    {"id": "WH-002", "location": {"city": "Brooklyn", "state": "New York", "zipCode": "11201"}, "managedBy": "Jane Smith", "capacity": {"used": 5000, "total": 8000}},
    {"id": "WH-003", "location": {"city": "Houston", "state": "Texas", "zipCode": "77001"}, "managedBy": "Mike Johnson", "capacity": {"used": 9000, "total": 12000}},
    {"id": "WH-004", "location": {"city": "Chicago", "state": "Illinois", "zipCode": "60601"}, "managedBy": "Sarah Wilson", "capacity": {"used": 11000, "total": 15000}},
    {"id": "WH-005", "location": {"city": "Miami", "state": "Florida", "zipCode": "33101"}, "managedBy": "David Brown", "capacity": {"used": 4500, "total": 7000}},
    {"id": "WH-006", "location": {"city": "Seattle", "state": "Washington", "zipCode": "98101"}, "managedBy": "Emily Davis", "capacity": {"used": 6000, "total": 9000}},
    {"id": "WH-007", "location": {"city": "Phoenix", "state": "Arizona", "zipCode": "85001"}, "managedBy": "Michael Taylor", "capacity": {"used": 8500, "total": 11000}},
    {"id": "WH-008", "location": {"city": "Boston", "state": "Massachusetts", "zipCode": "02101"}, "managedBy": "Lisa Anderson", "capacity": {"used": 4000, "total": 6000}},
    {"id": "WH-009", "location": {"city": "Denver", "state": "Colorado", "zipCode": "80201"}, "managedBy": "Robert Martinez", "capacity": {"used": 5500, "total": 8400}},
    {"id": "WH-010", "location": {"city": "Portland", "state": "Oregon", "zipCode": "97201"}, "managedBy": "Jennifer Thomas", "capacity": {"used": 6000, "total": 7500}},
]

CUSTOMERS = [
    {"id": "CUST-001", "name": "John Doe", "city": "Los Angeles", "state": "California", "zipcode": "90001"},
    {"id": "CUST-002", "name": "Alice Smith", "city": "Houston", "state": "Texas", "zipcode": "77001"},
    {"id": "CUST-003", "name": "Robert Brown", "city": "New York", "state": "New York", "zipcode": "10001"},
    {"id": "CUST-004", "name": "Sarah Johnson", "city": "Chicago", "state": "Illinois", "zipcode": "60601"},
    {"id": "CUST-005", "name": "Michael Williams", "city": "Phoenix", "state": "Arizona", "zipcode": "85001"},
    {"id": "CUST-006", "name": "Emily Davis", "city": "Philadelphia", "state": "Pennsylvania", "zipcode": "19101"},
    {"id": "CUST-007", "name": "David Miller", "city": "San Antonio", "state": "Texas", "zipcode": "78205"},
    {"id": "CUST-008", "name": "Jennifer Wilson", "city": "San Diego", "state": "California", "zipcode": "92101"},
    {"id": "CUST-009", "name": "James Taylor", "city": "Dallas", "state": "Texas", "zipcode": "75201"},
    {"id": "CUST-010", "name": "Elizabeth Anderson", "city": "San Jose", "state": "California", "zipcode": "95101"},
    {"id": "CUST-011", "name": "Richard Martinez", "city": "Seattle", "state": "Washington", "zipcode": "98101"},
    {"id": "CUST-012", "name": "Patricia Thomas", "city": "Denver", "state": "Colorado", "zipcode": "80201"},
    {"id": "CUST-013", "name": "Charles White", "city": "Boston", "state": "Massachusetts", "zipcode": "02108"},
    {"id": "CUST-014", "name": "Linda Garcia", "city": "Austin", "state": "Texas", "zipcode": "73301"},
    {"id": "CUST-015", "name": "Joseph Lee", "city": "Portland", "state": "Oregon", "zipcode": "97201"},
    {"id": "CUST-016", "name": "Mary Rodriguez", "city": "Miami", "state": "Florida", "zipcode": "33101"},
    {"id": "CUST-017", "name": "Thomas Walker", "city": "Atlanta", "state": "Georgia", "zipcode": "30301"},
    {"id": "CUST-018", "name": "Karen Hernandez", "city": "Detroit", "state": "Michigan", "zipcode": "48201"},
    {"id": "CUST-019", "name": "Daniel King", "city": "Charlotte", "state": "North Carolina", "zipcode": "28201"},
    {"id": "CUST-020", "name": "Susan Wright", "city": "Las Vegas", "state": "Nevada", "zipcode": "89101"},
]


def sample_dataset() -> ReportDataset:
    return ReportDataset(
        products=PRODUCTS,
        inventory=INVENTORY,
        categories=CATEGORIES,
        suppliers=SUPPLIERS,
        orders=ORDERS,
        warehouses=WAREHOUSES,
        customers=CUSTOMERS,
    )
