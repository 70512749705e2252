"""
Application layer for the promotion bounded context.
"""
