"""
FileScope - static feature extraction for uploaded files.
"""

__version__ = "1.0.0"
