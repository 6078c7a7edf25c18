"""Diff-to-review pipeline."""
