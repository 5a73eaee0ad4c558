"""PyQt6 graphical interface for Word Lookup."""
