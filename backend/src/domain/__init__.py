"""
Domain Layer - Activity entity, value objects and repository contracts.

This layer has no dependencies on frameworks or infrastructure.
"""
