"""
FileScope API Package
"""
