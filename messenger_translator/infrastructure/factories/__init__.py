"""Factories for creating service instances."""

from messenger_translator.infrastructure.factories.provider_factory import ProviderFactory

__all__ = [
    "ProviderFactory",
]
