"""
Test suite for galaxon-core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
