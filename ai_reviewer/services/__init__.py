"""Reviewer services."""
