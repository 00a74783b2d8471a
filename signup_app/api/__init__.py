"""
API layer for the signup service.

Exposes the signup validation endpoint under /api and a plain-text
liveness endpoint at the root.
"""
