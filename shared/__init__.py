"""
Shared Kernel

Cross-cutting building blocks used by every app: the domain error
taxonomy and the JSON envelope helpers of the HTTP API.
"""
