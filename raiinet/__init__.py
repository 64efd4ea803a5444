"""A two-player terminal board game of data links, viruses and firewalls."""

__version__ = "1.0.0"