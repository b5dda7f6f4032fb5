"""Bookings app package.

The booking ledger: students request time slots on campus resources and
administrators approve or reject them. Approved bookings of a resource
never overlap on the same date; the check and the write share one
transaction with the resource row locked.
"""
