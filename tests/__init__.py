"""
Test suite for anybase

Contains:
- tests/unit/          : Unit tests for individual modules
"""
