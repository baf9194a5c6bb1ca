"""
Core domain models, mathematical primitives, and data contracts.

This module contains the building blocks that do not depend on a concrete
language: value objects, group decomposition, and language pack validation.
"""
