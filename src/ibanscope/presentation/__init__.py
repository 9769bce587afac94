"""Presentation layer of ibanscope."""
