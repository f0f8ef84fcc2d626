"""Core building blocks (value objects, ports, factories, exceptions)."""
