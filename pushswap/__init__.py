"""Two-stack integer sorting that produces push, swap and rotate moves."""

__version__ = "0.1.0"