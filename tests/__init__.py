"""
Test suite for exact-geometry

Contains:
- tests/unit/          : Unit tests for fractions, points, vectors, rectangles and contracts
"""
