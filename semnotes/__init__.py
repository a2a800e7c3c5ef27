"""Semnotes - index note files into a database and browse OpenAI models."""

__version__ = "0.1.0"
