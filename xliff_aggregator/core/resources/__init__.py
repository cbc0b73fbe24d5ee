"""
Resource containers: translation sets and the resource file interface.
"""

from .resource_file import ResourceFile
from .translation_set import TranslationSet

__all__ = [
    "TranslationSet",
    "ResourceFile",
]
