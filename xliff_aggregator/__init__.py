"""
XLIFF aggregation plugin for the localization extraction tool.

Collects new, pseudo-localized and extracted string resources, merges them
into a single XLIFF file and hands changed files to xcodebuild for import.
"""

__version__ = "0.1.0"
