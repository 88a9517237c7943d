"""
EchoVault Mood - keyword-based mood analysis with a bounded mood history.

This package classifies free-form text into emotions using a static lexicon,
keeps a capacity-bounded history of recorded moods, and exposes both over an
HTTP API with Server-Sent Events streaming and a command-line client.
"""

__version__ = "0.1.0"
