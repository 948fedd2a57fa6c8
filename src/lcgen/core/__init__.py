"""Core configuration and parameter models for lcgen."""

from .models import LcgParams, OutputFormat, RawLcgParams, SequenceReport, summarize

__all__ = [
    "LcgParams",
    "OutputFormat",
    "RawLcgParams",
    "SequenceReport",
    "summarize",
]
