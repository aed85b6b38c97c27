"""
Test suite for fixed_decimal

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
