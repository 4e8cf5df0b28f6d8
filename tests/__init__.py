"""
Test suite for the Arabic/Roman calculator

Contains:
- tests/unit/          : Unit tests for individual modules
"""
