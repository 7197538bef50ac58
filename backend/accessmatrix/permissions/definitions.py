# Overview: All capability definitions organized by category.
# Each capability is defined as: (code, name, description)
# Codes are category-scoped; the same code may appear in several categories.

from .categories import PermissionCategory


# -- USERS --

USER_CAPABILITIES = [
    ("menuPage", "Users Menu", "Show the user management menu entry"),
    ("inviteUser", "Invite User", "Send invitations to new staff accounts"),
    ("viewLogs", "View Logs", "View user activity logs"),
    ("manageUserGroup", "Manage User Groups", "Create and edit user groups and their grants"),
]


# -- CUSTOMERS --

CUSTOMER_CAPABILITIES = [
    ("menuPage", "Customers Menu", "Show the customers menu entry"),
    ("addNew", "Add Customer", "Create new customer records"),
    ("activateDeactivate", "Activate/Deactivate", "Activate or deactivate customers"),
    ("customerRoles", "Customer Roles", "Assign roles to customer contacts"),
    ("inviteCustomer", "Invite Customer", "Invite customers to the customer portal"),
    ("creditLimitView", "View Credit Limit", "View customer credit limits"),
    ("creditLimitEdit", "Edit Credit Limit", "Change customer credit limits"),
    ("accountingTermsView", "View Accounting Terms", "View customer payment terms"),
    ("accountingTermsEdit", "Edit Accounting Terms", "Change customer payment terms"),
    ("discounts", "Discounts", "Grant customer-level discounts"),
]


# -- SUPPLIERS / MANUFACTURERS --

SUPPLIER_CAPABILITIES = [
    ("menuPage", "Suppliers Menu", "Show the suppliers menu entry"),
    ("addNew", "Add Supplier", "Create new suppliers"),
    ("edit", "Edit Supplier", "Edit supplier details"),
    ("delete", "Delete Supplier", "Delete suppliers"),
    ("activateDeactivate", "Activate/Deactivate", "Activate or deactivate suppliers"),
]

MANUFACTURER_CAPABILITIES = [
    ("menuPage", "Manufacturers Menu", "Show the manufacturers menu entry"),
    ("addNew", "Add Manufacturer", "Create new manufacturers"),
    ("edit", "Edit Manufacturer", "Edit manufacturer details"),
    ("delete", "Delete Manufacturer", "Delete manufacturers"),
    ("activateDeactivate", "Activate/Deactivate", "Activate or deactivate manufacturers"),
]


# -- PRODUCTS --

PRODUCT_CAPABILITIES = [
    ("menuPage", "Products Menu", "Show the products menu entry"),
    ("viewProducts", "View Products", "Browse the product catalogue"),
    ("addNew", "Add Product", "Create new products"),
    ("edit", "Edit Product", "Edit product details"),
    ("delete", "Delete Product", "Delete products"),
    ("viewCostPrice", "View Cost Price", "See product cost prices"),
    ("editCostPrice", "Edit Cost Price", "Change product cost prices"),
    ("viewSalePrice", "View Sale Price", "See product sale prices"),
    ("editSalePrice", "Edit Sale Price", "Change product sale prices"),
    ("viewNonRetailPrice", "View Non-Retail Price", "See trade and wholesale price levels"),
    ("bulkImport", "Bulk Import", "Import products from spreadsheets"),
    ("bulkUpdate", "Bulk Update", "Update many products at once"),
    ("bulkExport", "Bulk Export", "Export the product catalogue"),
    ("manageCategories", "Manage Categories", "Edit the product category tree"),
    ("activateDeactivate", "Activate/Deactivate", "Activate or deactivate products"),
]

PACKAGE_CAPABILITIES = [
    ("menuPage", "Packages Menu", "Show the packages menu entry"),
    ("addNew", "Add Package", "Create product packages"),
    ("edit", "Edit Package", "Edit product packages"),
    ("delete", "Delete Package", "Delete product packages"),
    ("activateDeactivate", "Activate/Deactivate", "Activate or deactivate packages"),
]

PRODUCT_SPECIFICATION_CAPABILITIES = [
    ("menuPage", "Specifications Menu", "Show the product specifications menu entry"),
    ("addNew", "Add Specification", "Create product specifications"),
    ("edit", "Edit Specification", "Edit product specifications"),
    ("delete", "Delete Specification", "Delete product specifications"),
    ("copy", "Copy Specification", "Duplicate an existing specification"),
]


# -- PRICING --

PRICING_TEMPLATE_CAPABILITIES = [
    ("menuPage", "Pricing Templates Menu", "Show the pricing templates menu entry"),
    ("view", "View Templates", "View pricing templates"),
    ("create", "Create Template", "Create pricing templates from scratch"),
    ("addNew", "Add Template", "Add pricing templates"),
    ("edit", "Edit Template", "Edit pricing templates"),
    ("delete", "Delete Template", "Delete pricing templates"),
    ("copy", "Copy Template", "Duplicate a pricing template"),
]

CUSTOM_PROCESS_PRICE_CAPABILITIES = [
    ("menuPage", "Process Prices Menu", "Show the custom process prices menu entry"),
    ("view", "View Process Prices", "View custom process prices"),
    ("addNew", "Add Process Price", "Create custom process prices"),
    ("edit", "Edit Process Price", "Edit custom process prices"),
    ("delete", "Delete Process Price", "Delete custom process prices"),
    ("copy", "Copy Process Price", "Duplicate a custom process price"),
    ("viewCostPrice", "View Cost Price", "See process cost prices"),
    ("viewNonRetailPrice", "View Non-Retail Price", "See trade process prices"),
]


# -- SALES DOCUMENTS --

ORDER_CAPABILITIES = [
    ("menuPage", "Orders Menu", "Show the orders menu entry"),
    ("addNew", "Add Order", "Create new orders"),
    ("edit", "Edit Order", "Edit open orders"),
    ("delete", "Delete Order", "Delete orders"),
    ("confirmOrder", "Confirm Order", "Confirm orders for fulfilment"),
    ("viewStatusPage", "View Status Page", "View the order status board"),
    ("acceptDeclineOrder", "Accept/Decline Order", "Accept or decline incoming orders"),
    ("viewAllOrders", "View All Orders", "See orders created by other staff"),
    ("viewOrders", "View Orders", "Open order details"),
    ("viewPrices", "View Prices", "See line prices on orders"),
    ("changeIndividualPrices", "Change Line Prices", "Override individual line prices"),
    ("negativeCustomText", "Negative Custom Text", "Add negative-value custom text lines"),
    ("superviseOrders", "Supervise Orders", "Supervise orders of other staff"),
    ("cancelOrder", "Cancel Order", "Cancel confirmed orders"),
    ("creditInvoice", "Credit Invoice", "Raise credit notes against orders"),
]

QUOTE_CAPABILITIES = [
    ("menuPage", "Quotes Menu", "Show the quotes menu entry"),
    ("addNew", "Add Quote", "Create new quotes"),
    ("edit", "Edit Quote", "Edit open quotes"),
    ("delete", "Delete Quote", "Delete quotes"),
    ("sendQuote", "Send Quote", "Email quotes to customers"),
    ("convertToOrder", "Convert to Order", "Convert accepted quotes into orders"),
    ("acceptDeclineQuote", "Accept/Decline Quote", "Mark quotes accepted or declined"),
    ("viewAllQuotes", "View All Quotes", "See quotes created by other staff"),
    ("viewPrices", "View Prices", "See line prices on quotes"),
    ("changeIndividualPrices", "Change Line Prices", "Override individual line prices"),
    ("negativeCustomText", "Negative Custom Text", "Add negative-value custom text lines"),
    ("superviseQuotes", "Supervise Quotes", "Supervise quotes of other staff"),
]

INVOICE_CAPABILITIES = [
    ("menuPage", "Invoices Menu", "Show the invoices menu entry"),
    ("generate", "Generate Invoice", "Generate invoices from orders"),
    ("edit", "Edit Invoice", "Edit draft invoices"),
    ("delete", "Delete Invoice", "Delete invoices"),
    ("send", "Send Invoice", "Email invoices to customers"),
    ("viewAllInvoices", "View All Invoices", "See invoices raised by other staff"),
    ("viewCostPrice", "View Cost Price", "See cost prices on invoices"),
    ("showPrices", "Show Prices", "Show line prices on invoices"),
    ("newPrices", "New Prices", "Apply updated prices when invoicing"),
    ("changeIndividualPrices", "Change Line Prices", "Override individual line prices"),
    ("negativeCustomText", "Negative Custom Text", "Add negative-value custom text lines"),
    ("markSupplied", "Mark Supplied", "Mark invoice lines as supplied"),
    ("draft", "Draft Invoice", "Save invoices as drafts"),
    ("approveDraftInvoice", "Approve Draft", "Approve draft invoices for sending"),
    ("print", "Print Invoice", "Print invoices"),
    ("payInvoice", "Pay Invoice", "Record invoice payments"),
    ("refreshXeroToken", "Refresh Accounting Link", "Refresh the accounting integration token"),
]

CUSTOM_TEXT_CAPABILITIES = [
    ("menuPage", "Custom Text Menu", "Show the custom text menu entry"),
    ("view", "View Custom Text", "View custom text snippets"),
    ("addNew", "Add Custom Text", "Create custom text snippets"),
    ("edit", "Edit Custom Text", "Edit custom text snippets"),
    ("delete", "Delete Custom Text", "Delete custom text snippets"),
]


# -- DELIVERY / INVENTORY / PURCHASING --

DELIVERY_CAPABILITIES = [
    ("menuPage", "Delivery Menu", "Show the logistics menu entry"),
    ("managePick", "Manage Picks", "Manage pick lists"),
    ("addPick", "Add Pick", "Create pick lists"),
    ("editPick", "Edit Pick", "Edit pick lists"),
    ("deletePick", "Delete Pick", "Delete pick lists"),
    ("addPickTruck", "Add Pick Truck", "Assign trucks to picks"),
    ("editPickTruck", "Edit Pick Truck", "Change truck assignments on picks"),
    ("deletePickTruck", "Delete Pick Truck", "Remove truck assignments from picks"),
    ("managePickSchedule", "Pick Schedule", "Manage the pick schedule"),
    ("schedule", "Schedule", "Schedule deliveries"),
    ("addTruck", "Add Truck", "Register new trucks"),
    ("editTruck", "Edit Truck", "Edit truck details"),
    ("deleteTruck", "Delete Truck", "Remove trucks"),
    ("manageDelivery", "Manage Delivery", "Manage delivery runs"),
    ("deliveryScheduling", "Delivery Scheduling", "Plan delivery time slots"),
    ("routeOptimization", "Route Optimization", "Optimise delivery routes"),
    ("fleetManagement", "Fleet Management", "Manage the vehicle fleet"),
    ("driverManagement", "Driver Management", "Manage drivers and assignments"),
    ("deliveryTracking", "Delivery Tracking", "Track deliveries in progress"),
    ("customerNotifications", "Customer Notifications", "Send delivery notifications to customers"),
]

INVENTORY_CAPABILITIES = [
    ("menuPageVisible", "Inventory Menu", "Show the inventory menu entry"),
    ("addNew", "Add Stock Item", "Create inventory items"),
    ("edit", "Edit Stock Item", "Edit inventory items"),
    ("delete", "Delete Stock Item", "Delete inventory items"),
    ("stockCheck", "Stock Check", "Check stock levels"),
    ("receiveStock", "Receive Stock", "Book incoming stock"),
    ("removeStock", "Remove Stock", "Book outgoing stock"),
    ("adjustStock", "Adjust Stock", "Correct stock quantities"),
    ("cancelSupply", "Cancel Supply", "Cancel pending supply"),
    ("viewStockHistory", "Stock History", "View stock movement history"),
    ("exportData", "Export Data", "Export inventory data"),
    ("stocktakes", "Stocktakes", "Run stocktakes"),
]

PURCHASE_CAPABILITIES = [
    ("menuPageVisible", "Purchasing Menu", "Show the purchase orders menu entry"),
    ("addNew", "Add Purchase Order", "Create purchase orders"),
    ("edit", "Edit Purchase Order", "Edit purchase orders"),
    ("delete", "Delete Purchase Order", "Delete purchase orders"),
    ("confirmPurchase", "Confirm Purchase", "Confirm purchase orders with suppliers"),
]

JOB_CAPABILITIES = [
    ("manageTask", "Manage Tasks", "Manage job tasks"),
    ("addTask", "Add Task", "Create job tasks"),
    ("editTask", "Edit Task", "Edit job tasks"),
    ("deleteTask", "Delete Task", "Delete job tasks"),
    ("addJob", "Add Job", "Create jobs"),
    ("editJob", "Edit Job", "Edit jobs"),
    ("deleteJob", "Delete Job", "Delete jobs"),
    ("viewJob", "View Job", "View jobs"),
    ("editAllocation", "Edit Allocation", "Edit staff allocations"),
    ("taskAllocation", "Task Allocation", "Allocate tasks to staff"),
    ("taskSubAllocation", "Task Sub-Allocation", "Allocate sub-tasks to staff"),
    ("jobTaskAllocation", "Job Task Allocation", "Allocate job tasks"),
    ("jobTaskSubAllocation", "Job Task Sub-Allocation", "Allocate job sub-tasks"),
]

STOCK_CAPABILITIES = [
    ("stockInvoice", "Stock Invoice", "Invoice stock movements"),
    ("addStockPrice", "Add Stock Price", "Add stock price levels"),
    ("editStockPrice", "Edit Stock Price", "Edit stock price levels"),
    ("randomStock", "Random Stock", "Record unplanned stock items"),
]


# -- MODULES / ADMINISTRATION --

MODULE_CAPABILITIES = [
    ("glassGlobleModule", "Glass Module", "Access the glass module"),
    ("accessCustomGroup", "Custom Groups", "Access custom product groups"),
    ("manageProcessPricing", "Process Pricing", "Access process pricing"),
    ("manageCustomText", "Custom Text", "Access the custom text module"),
    ("manageGlassTemplate", "Glass Templates", "Access glass templates"),
    ("managePricingTemplate", "Pricing Templates", "Access the pricing templates module"),
    ("manageOrders", "Orders Module", "Access the orders module"),
    ("manageQuotes", "Quotes Module", "Access the quotes module"),
    ("manageInvoices", "Invoices Module", "Access the invoices module"),
    ("managePackages", "Packages Module", "Access the packages module"),
    ("manageStock", "Stock Module", "Access the stock module"),
    ("manageProcess", "Process Module", "Access the process module"),
    ("manageCustomProcess", "Custom Process Module", "Access the custom process module"),
]

COMPANY_ADMIN_CAPABILITIES = [
    ("autoConfig", "Auto Configuration", "Run automatic company configuration"),
    ("deliverySetting", "Delivery Settings", "Edit delivery settings"),
    ("companySetting", "Company Settings", "Edit company settings and open the admin area"),
    ("accessCompanies", "Access Companies", "Switch between companies"),
    ("exportCustom", "Custom Export", "Run custom data exports"),
    ("exportData", "Export Data", "Export company data"),
]

DASHBOARD_REPORT_CAPABILITIES = [
    ("manageWarehouse", "Warehouse Dashboard", "View the warehouse dashboard"),
    ("salesReport", "Sales Report", "View sales reports"),
    ("invoiceReports", "Invoice Reports", "View invoice reports"),
    ("statusManagement", "Status Management", "Manage document status boards"),
]

LOGISTIC_CAPABILITIES = [
    ("schedulePO", "Schedule PO", "Schedule purchase order deliveries"),
    ("accessLogistic", "Access Logistics", "Access the logistics workspace"),
]

PRODUCT_TYPE_CAPABILITIES = [
    ("accessGlass", "Glass Products", "Work with glass products"),
    ("accessHardware", "Hardware Products", "Work with hardware products"),
    ("accessSuperset", "Superset Products", "Work with superset products"),
]


# Category -> capability definitions, in display order.
PERMISSION_SCHEMA = {
    PermissionCategory.MANAGE_USERS: USER_CAPABILITIES,
    PermissionCategory.MANAGE_CUSTOMERS: CUSTOMER_CAPABILITIES,
    PermissionCategory.MANAGE_SUPPLIER: SUPPLIER_CAPABILITIES,
    PermissionCategory.MANAGE_MANUFACTURERS: MANUFACTURER_CAPABILITIES,
    PermissionCategory.MANAGE_PRODUCTS: PRODUCT_CAPABILITIES,
    PermissionCategory.MANAGE_PACKAGES: PACKAGE_CAPABILITIES,
    PermissionCategory.MANAGE_PRODUCT_SPECIFICATION: PRODUCT_SPECIFICATION_CAPABILITIES,
    PermissionCategory.PRICING_TEMPLATE: PRICING_TEMPLATE_CAPABILITIES,
    PermissionCategory.CUSTOM_PROCESS_PRICE: CUSTOM_PROCESS_PRICE_CAPABILITIES,
    PermissionCategory.MANAGE_ORDERS: ORDER_CAPABILITIES,
    PermissionCategory.MANAGE_QUOTES: QUOTE_CAPABILITIES,
    PermissionCategory.MANAGE_INVOICES: INVOICE_CAPABILITIES,
    PermissionCategory.MANAGE_CUSTOM_TEXT: CUSTOM_TEXT_CAPABILITIES,
    PermissionCategory.MANAGE_DELIVERY: DELIVERY_CAPABILITIES,
    PermissionCategory.MANAGE_INVENTORY: INVENTORY_CAPABILITIES,
    PermissionCategory.MANAGE_PURCHASE: PURCHASE_CAPABILITIES,
    PermissionCategory.MANAGE_JOBS: JOB_CAPABILITIES,
    PermissionCategory.MANAGE_STOCK: STOCK_CAPABILITIES,
    PermissionCategory.MODULES: MODULE_CAPABILITIES,
    PermissionCategory.COMPANY_ADMIN: COMPANY_ADMIN_CAPABILITIES,
    PermissionCategory.DASHBOARD_REPORTS: DASHBOARD_REPORT_CAPABILITIES,
    PermissionCategory.LOGISTIC: LOGISTIC_CAPABILITIES,
    PermissionCategory.PRODUCT_TYPES: PRODUCT_TYPE_CAPABILITIES,
}
