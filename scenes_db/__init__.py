"""Scenes DB: named scene configurations persisted to a single JSON document."""
