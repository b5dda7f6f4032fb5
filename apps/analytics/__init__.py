"""Administrator dashboard: counts, pending approvals, users and system status."""
