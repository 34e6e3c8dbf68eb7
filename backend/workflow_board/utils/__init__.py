"""Utilities for Workflow Board."""
