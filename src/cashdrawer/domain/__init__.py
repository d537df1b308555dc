"""Domain layer — money, denominations, change planning, and the drawer.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
