"""Top-level package for Django configuration.

This package exposes configuration for the Campus Sync booking service. It
contains settings modules for different environments and entry points for
WSGI and ASGI.
"""
