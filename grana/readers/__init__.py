"""Readers for exported backend tables."""

from grana.readers.record_reader import RecordReader

__all__ = ["RecordReader"]
