"""
Database models for the SQL mapping store.
"""

from .mapping import MappingRecord

__all__ = ["MappingRecord"]
