"""
Test suite for fixeddec

Contains:
- tests/unit/          : Unit tests for individual modules
"""
