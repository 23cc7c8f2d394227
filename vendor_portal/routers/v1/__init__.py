"""v1 router package — all /api/v1/* endpoints live here.

Files:
  registration.py   — public wizard step checks, drafts and submission
  vendors.py        — admin vendor listing/export/removal, profile sections, sharing
  review.py         — approve / reject / resubmit
  documents.py      — document upload, download and metadata
  notifications.py  — stored notifications, computed alerts, preferences
  audit.py          — audit log listing and stats
  compliance.py     — compliance tracking and upcoming expiries
  analytics.py      — dashboard stats, breakdowns, reports, CSV export
  directory.py      — public directory of approved vendors
  auth.py           — admin / vendor signup and login
  admins.py         — admin account management
  emails.py         — confirmation email formatting

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to vendor_portal/services/.
"""
