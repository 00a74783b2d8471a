"""
Signup Validation Application - root package.

This package contains the FastAPI app entry point (main.py), the signup
validation endpoint, the shared field rule table, and the client-side form
controller that validates fields as they change and submits the form.
"""
