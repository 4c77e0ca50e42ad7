"""
Core domain models, arbitrary-precision primitives, and invariants.

This module contains the foundational building blocks of anybase:
limb arithmetic, digit alphabets, request contracts and the error taxonomy.
"""
