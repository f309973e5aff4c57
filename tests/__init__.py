"""
Test suite for calc-kernel

Contains:
- tests/unit/          : Unit tests for individual modules
"""
