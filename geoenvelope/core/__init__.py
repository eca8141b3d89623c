"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks that are independent
of any concrete geometry library.
"""
