KIND_PRODUCT = "Product"
KIND_ELECTRONICS = "Electronics"
KIND_CLOTHING = "Clothing"
KIND_GROCERY = "Grocery"

# multipliers applied to the base price
ELECTRONICS_RATE = 0.90
CLOTHING_CLEARANCE_RATE = 0.70
CLOTHING_REGULAR_RATE = 0.95

STATUS_LABELS = {
    "created": "Created",
    "paid": "Paid",
    "shipped": "Shipped",
    "cancelled": "Cancelled",
}
