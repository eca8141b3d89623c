"""
Test suite for geoenvelope

Contains:
- tests/unit/          : Unit tests for individual modules
"""
