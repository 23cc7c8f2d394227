"""Routers package — HTTP endpoint definitions.

Files:
  deps.py  — bearer-token principal and access-check dependencies
  v1/      — Versioned API routes (/api/v1/*)
"""
