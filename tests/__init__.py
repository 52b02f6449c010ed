"""
Test suite for fp-geometry

Contains:
- tests/unit/          : Unit tests for individual modules
"""
