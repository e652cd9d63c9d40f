"""
Static demo data for the Consign Tracker dashboard.

This package contains fixture data used by DemoRecordService for development,
testing, and demonstrations without access to the tracker API.

Modules:
- demo_records: API-shaped record dictionaries, including duplicate sales
  report lines, extended JSON ids and malformed numeric fields
"""
