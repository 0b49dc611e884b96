"""Pydantic response models for the Currency Converter API."""

from .conversion import ConversionResponse

__all__ = ["ConversionResponse"]
