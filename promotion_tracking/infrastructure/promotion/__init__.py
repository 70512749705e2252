"""
Infrastructure adapters for the promotion bounded context.
"""
