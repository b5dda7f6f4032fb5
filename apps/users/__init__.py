"""Users app package.

Defines the custom user model with its closed set of roles (ADMIN and
STUDENT), JWT-based registration and login, and the role checks used by
the other apps. Use ``apps.users.models.CustomUser`` as the
AUTH_USER_MODEL throughout the project.
"""
