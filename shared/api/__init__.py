"""HTTP helpers shared by all API apps: envelope, pagination, errors."""
