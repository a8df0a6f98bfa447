"""
Test suite for infinite-int

Contains:
- tests/unit/          : Unit tests for individual modules
"""
