"""In-memory project and task tracker with simulated async I/O."""

__version__ = "0.1.0"
