"""Snapshot storage layer.

This module persists numbered, tag-scoped copies of the source file.
It powers archive, compare, and listing for the SDK and CLI.
"""
