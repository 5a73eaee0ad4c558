"""
Word Lookup - English Dictionary Lookup Tool

Fetches word definitions from the Free Dictionary API, renders meanings,
examples and synonyms, and plays pronunciation audio.
"""

__version__ = "1.0.0"
__author__ = "Word Lookup Contributors"
