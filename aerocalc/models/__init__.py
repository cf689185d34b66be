"""
Data models and contracts module.

Immutable parameter and result records for every calculation family.
Follows functional programming principles with frozen dataclasses.
"""
