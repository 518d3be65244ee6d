"""
Test suite for localized pricing presentation

Contains:
- tests/unit/          : Unit tests for individual modules
"""
