"""Minimal pastebin: post text, get a short token, read it back by URL."""

__version__ = "0.1.0"
