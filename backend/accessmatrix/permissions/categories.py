# Overview: Permission category constants for grouping related capabilities.


class PermissionCategory:
    """
    Permission categories.

    Values are the keys used in stored permission records, so they must
    never be renamed.
    """
    MANAGE_USERS = "manageUsers"
    MANAGE_CUSTOMERS = "manageCustomers"
    MANAGE_SUPPLIER = "manageSupplier"
    MANAGE_MANUFACTURERS = "manageManufacturers"
    MANAGE_PRODUCTS = "manageProducts"
    MANAGE_PACKAGES = "managePackages"
    MANAGE_PRODUCT_SPECIFICATION = "manageProductSpecification"
    PRICING_TEMPLATE = "pricingTemplate"
    CUSTOM_PROCESS_PRICE = "customProcessPrice"
    MANAGE_ORDERS = "manageOrders"
    MANAGE_QUOTES = "manageQuotes"
    MANAGE_INVOICES = "manageInvoices"
    MANAGE_CUSTOM_TEXT = "manageCustomText"
    MANAGE_DELIVERY = "manageDelivery"
    MANAGE_INVENTORY = "manageInventory"
    MANAGE_PURCHASE = "managePurchase"
    MANAGE_JOBS = "manageJobs"
    MANAGE_STOCK = "manageStock"
    MODULES = "modules"
    COMPANY_ADMIN = "companyAdmin"
    DASHBOARD_REPORTS = "dashboardReports"
    LOGISTIC = "logistic"
    PRODUCT_TYPES = "productTypes"
