"""
Boundary error handling.

Translates domain errors into HTTP responses in one place.
"""
