"""
Application Layer - Activity operations and business workflows.

This layer orchestrates domain entities and coordinates application logic.
It depends on the domain layer and reaches persistence only through
domain repository interfaces.
"""
