"""takehome - U.S. take-home pay estimates by salary and state."""

__version__ = "0.3.0"
