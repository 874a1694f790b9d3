"""A terminal arcade game of dodging enemies and collecting hearts."""

__version__ = "0.1.0"