"""Application state, configuration, command-line parsing and input handling for a terminal Spotify client."""

__version__ = "0.25.0"