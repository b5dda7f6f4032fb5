"""Resources app package.

Registry of bookable campus resources (labs, seminar halls, projectors).
Only administrators create, update or delete resources; the booking app
consults the registry to check that a resource exists and is active.
"""
