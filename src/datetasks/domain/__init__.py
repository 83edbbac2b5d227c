"""Domain layer — date-time parsing, calendar rules, and formatting.

This layer depends only on stdlib, pydantic, and dateutil. Log records go
through stdlib ``logging``; :mod:`datetasks.config.logging` renders them.
"""
