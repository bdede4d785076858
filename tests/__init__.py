"""
Test suite for raytracer

Contains:
- tests/unit/          : Unit tests for individual modules
"""
