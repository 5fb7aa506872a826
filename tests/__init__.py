"""
Test suite for coordnorm

Contains:
- tests/unit/          : Unit tests for individual modules
"""
