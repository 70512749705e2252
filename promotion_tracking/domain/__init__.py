"""
Domain layer package.

Contains the promotion entity, its patch value object, the error
taxonomy and the repository port. No framework imports, no IO.
"""
