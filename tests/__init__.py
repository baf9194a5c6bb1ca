"""
Test suite for numwords

Contains:
- tests/unit/          : Unit tests for individual modules and bundled language packs
"""
