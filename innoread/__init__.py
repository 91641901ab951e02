"""Readers for Inno Setup version data, CRC-checked chunk streams and Windows PE structures."""

__version__ = "0.1.0"