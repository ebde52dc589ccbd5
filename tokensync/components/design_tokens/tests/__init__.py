"""
Design tokens component tests.

- test_unit.py: component entry points with in-memory ports
"""
