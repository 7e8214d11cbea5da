"""Presentation layer: command line, pytest plugin, assertion helpers."""
