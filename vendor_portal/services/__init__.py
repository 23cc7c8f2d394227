"""Services package — all business logic lives here, never in routers.

Files:
  status.py        — pure completion percentage / status label derivation
  registration.py  — wizard step rules, drafts, vendor submission
  review.py        — approve / reject / resubmit transitions
  vendor.py        — vendor listing, profile sections, sharing, export, removal
  document.py      — document upload, download and metadata
  storage.py       — local filesystem storage for uploaded files
  notification.py  — stored notifications, computed alerts, preferences
  audit.py         — append-only audit log
  compliance.py    — compliance tracking and upcoming expiries
  analytics.py     — dashboard stats, breakdowns, stored reports
  directory.py     — public directory of approved vendors
  auth.py          — admin / vendor accounts and tokens
  email.py         — confirmation email formatting (logged, not sent)

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
