"""Conversion output model."""

from __future__ import annotations

from pydantic import BaseModel


class ConversionResult(BaseModel):
    """Final conversion output."""

    summary: str
    markdown: str
