"""
Core math primitives, domain values, contracts and error taxonomy.

This module contains the building blocks that are independent of any
particular representation family or output surface.
"""
