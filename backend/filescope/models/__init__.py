"""
FileScope Data Models Package

Pydantic models for data validation and serialization.
"""

from .static_analysis import *
from .classification import *
