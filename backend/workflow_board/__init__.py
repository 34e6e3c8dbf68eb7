"""Workflow Board: custom columns synchronized with workflow statuses."""
