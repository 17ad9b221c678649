"""Domain layer - core business objects and interfaces.

This layer contains:
- Domain entities (user preferences, inbound events)
- Repository interfaces
- Provider interfaces (Strategy Pattern)
- Domain exceptions
"""
