"""Parsers that turn uploaded sheets into raw records."""
