"""Domain constants for freelancer profit tracking."""

DEFAULT_CURRENCY = "USD"

CURRENCY_SYMBOLS = {
    "USD": "$",
}

UNKNOWN_CATEGORY_NAME = "Unknown"
UNKNOWN_CATEGORY_ICON = "questionmark.circle"

# Dashboard shows the biggest three expense categories.
DEFAULT_TOP_CATEGORIES = 3

# Month-over-month change when the previous month broke exactly even.
MOM_CHANGE_FROM_ZERO_PROFIT = 100

DEFAULT_FREELANCER_CATEGORIES = (
    ("Software & Tools", "laptopcomputer"),
    ("Equipment & Gear", "desktopcomputer"),
    ("Platform Fees", "percent"),
    ("Marketing & Ads", "megaphone"),
    ("Website & Hosting", "globe"),
    ("Legal & Accounting", "briefcase"),
    ("Courses & Education", "book"),
    ("Travel & Mileage", "car"),
    ("Coworking / Office", "building.2"),
    ("Client Meals", "fork.knife"),
    ("Insurance", "shield"),
    ("Payment Processing", "creditcard"),
    ("Misc Write-Offs", "folder"),
)

HISTORY_MONTHS = 12


__all__ = [
    "DEFAULT_CURRENCY",
    "CURRENCY_SYMBOLS",
    "UNKNOWN_CATEGORY_NAME",
    "UNKNOWN_CATEGORY_ICON",
    "DEFAULT_TOP_CATEGORIES",
    "MOM_CHANGE_FROM_ZERO_PROFIT",
    "DEFAULT_FREELANCER_CATEGORIES",
    "HISTORY_MONTHS",
]
