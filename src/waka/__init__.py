"""Detect installed code editors and install the WakaTime plugin into them."""

__version__ = "0.1.0"
