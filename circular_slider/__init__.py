"""Concentric circular range sliders rendered with PyQt5."""
