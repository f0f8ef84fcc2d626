"""Factories for nutrition targets domain."""

from .profile_factory import ProfileFactory

__all__ = ["ProfileFactory"]
