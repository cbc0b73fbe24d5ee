"""
External importers for persisted exchange files.
"""

from .base_importer import BaseImporter
from .xcode_importer import COMMAND_NOT_FOUND_STATUS, XcodeImporter

__all__ = [
    "BaseImporter",
    "XcodeImporter",
    "COMMAND_NOT_FOUND_STATUS",
]
