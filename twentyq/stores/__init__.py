"""Candidate stores for the inference engine."""

from .subset import SubsetTrackingStore

__all__ = ["SubsetTrackingStore"]
