"""
Core exact-arithmetic geometry: fractions, points, vectors and rectangles.

This module contains the foundational building blocks that are independent
of any rendering or terminal layer (which consume these types as values).
"""
