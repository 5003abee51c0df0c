"""
Portal Permissions - Actions and Module Catalog
===============================================
"""

ACTION_VIEW = "view"
ACTION_CREATE = "create"
ACTION_EDIT = "edit"
ACTION_DELETE = "delete"

VALID_ACTIONS = (ACTION_VIEW, ACTION_CREATE, ACTION_EDIT, ACTION_DELETE)

MUTATING_ACTIONS = frozenset({ACTION_CREATE, ACTION_EDIT, ACTION_DELETE})

MODULE_DASHBOARD = "dashboard"
MODULE_PRODUCTS = "products"
MODULE_EMPLOYEES = "employees"
MODULE_SALES = "sales"
MODULE_VENDORS = "vendors"
MODULE_ORDERS = "orders"
MODULE_LICENSES = "licenses"
MODULE_SALARY = "salary"
MODULE_INVENTORY = "inventory"
MODULE_DELIVERY = "delivery"
MODULE_SETTINGS = "settings"
MODULE_REPORTS = "reports"
MODULE_AUDIT = "audit"
MODULE_USERS = "users"
MODULE_ADMIN = "admin"

MODULE_DISPLAY_NAMES = {
    MODULE_DASHBOARD: "Dashboard",
    MODULE_PRODUCTS: "Products",
    MODULE_EMPLOYEES: "Employees",
    MODULE_SALES: "Sales Reports",
    MODULE_VENDORS: "Vendors",
    MODULE_ORDERS: "Orders",
    MODULE_LICENSES: "Licenses & Certificates",
    MODULE_SALARY: "Salary Records",
    MODULE_INVENTORY: "Inventory",
    MODULE_DELIVERY: "Delivery Records",
    MODULE_SETTINGS: "Settings",
    MODULE_REPORTS: "Reports",
    MODULE_AUDIT: "Audit Logs",
    MODULE_USERS: "User Management",
    MODULE_ADMIN: "Administration",
}

KNOWN_MODULES = frozenset(MODULE_DISPLAY_NAMES)
