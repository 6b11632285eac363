"""
Test suite for matrix_reloaded

Contains:
- tests/unit/          : Unit tests for individual modules
"""
