"""Pydantic schemas package.

Folder intent:
  common.py        — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  vendor.py        — registration, drafts, vendor detail, section updates, review
  document.py      — document metadata + verification documents
  auth.py          — admin / vendor signup & login, admin management
  notification.py  — notifications, generated alerts, preferences
  audit.py         — audit log listing
  compliance.py    — compliance tracking rows
  analytics.py     — dashboard stats, analytics, stored reports
  directory.py     — public vendor directory
  email.py         — confirmation email formatting
"""
