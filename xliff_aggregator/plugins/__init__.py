"""
File type plugins for the extraction framework.
"""

from .file_type import FileType
from .xliff_file_type import MERGED_CATEGORIES, XliffFileType, is_import_required

__all__ = [
    "FileType",
    "XliffFileType",
    "MERGED_CATEGORIES",
    "is_import_required",
]
