"""Discrete simulation of a fission reactor: configuration, atoms and the run loop."""

__version__ = "0.1.0"