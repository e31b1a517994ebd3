"""
Test suite for sl2-word-trace

Contains:
- tests/unit/          : Unit tests for individual modules and the CLI
"""
