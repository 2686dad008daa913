"""
FileScope Services Package

Business logic modules for file analysis:
- static_analysis: Hashing, entropy, strings, keyword/IOC matching, ZIP listing
- classifier: Hand-off of reports to the external classifier
"""

# Services are imported explicitly when needed to avoid circular imports
# Example: from filescope.services.static_analysis import StaticAnalyzer

__all__ = [
    'static_analysis',
    'classifier',
]
