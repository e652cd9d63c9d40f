"""
Consign Tracker: A Dash dashboard for following consignment sales reports.

Staff search the consignment sales dataset by C.O. number, SR ID or invoice
number and see, per sales report, whether it is awaiting an invoice, waiting
for a voucher, or complete.

Subpackages:
- components: Reusable Dash UI components
- models: Record, state and view models
- pipeline: Merge, search, sort, paging, totals and status derivation
- services: Data access layer (demo and HTTP implementations)
- data: Static demo fixtures

Main entry points:
- app.main(): Start the development server
- app.server: The Flask server of the Dash app (for WSGI deployment)
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
