"""
Core domain models, numeral tables, and invariants.

This module contains the foundational building blocks of the calculator:
numeral values, operators, the error taxonomy and the Roman encoder.
"""
