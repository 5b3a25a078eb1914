"""
Batch parsing of URL columns.
"""

from .processor import BatchParser

__all__ = ["BatchParser"]
