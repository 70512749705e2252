"""
Promotion bounded context: domain layer.
"""
