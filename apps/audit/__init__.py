"""Audit app package.

Append-only trail of state-changing actions (registrations, logins,
resource and booking changes). Entries are written best-effort by
``apps.audit.services.record`` and are never updated or deleted.
"""
