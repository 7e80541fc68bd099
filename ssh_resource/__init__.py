"""Concourse resource that runs a script on a remote host over SSH."""

__version__ = "0.1.0"
