"""Hammer - reflex game: smash targets crossing the center band."""
