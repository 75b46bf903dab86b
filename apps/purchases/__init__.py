"""
Purchases App - Checkout and Dispatch

Processes shop purchases and tracks their delivery.

Key Features:
- Atomic checkout: stock deduction for every cart line plus dispatch record
- Priced line snapshots (name and price at purchase time)
- Dispatch status tracking (Pending, InDispatch, Delivered, Cancelled)

Architecture:
- Models: DispatchRecord, DispatchLine
- Services: process_purchase, list_dispatch_records, update_dispatch_status
- Types: CartLine, CustomerDetails, PurchaseRequest
- Exceptions: PurchaseError hierarchy, tagged by ``code``
"""
