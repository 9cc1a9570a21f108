"""
Test suite for astro-units

Contains:
- tests/unit/          : Unit tests for math, formatting, domain and contracts modules
"""
