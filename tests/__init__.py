"""
Test suite for the fixed-point decimal engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
