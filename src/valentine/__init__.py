"""Animated rainbow heart for the terminal."""
