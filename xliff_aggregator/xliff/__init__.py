"""
XLIFF resource file implementation.
"""

from .xliff_file import XLIFF_NAMESPACE, XliffFile

__all__ = [
    "XliffFile",
    "XLIFF_NAMESPACE",
]
