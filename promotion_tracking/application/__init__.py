"""
Application layer package.

Orchestrates domain ports on behalf of the interface layer.
This layer depends on domain ports, never on infrastructure.
"""
