"""Textual UI layer for gamekeys."""
