"""
Pydantic models for filefetch.
"""

from filefetch.models.result import Complete, Failed, RetrievalResult

__all__ = ["Complete", "Failed", "RetrievalResult"]
