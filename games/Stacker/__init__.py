"""Stacker - timing game: build a tower from sliding blocks."""
