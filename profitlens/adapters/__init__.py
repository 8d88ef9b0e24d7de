"""Adapters: formatting, exports and command-line entry points."""
