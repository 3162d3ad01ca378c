"""
Invoice Tracker POC.

Page shell with placeholder views and the Loki Mode integration flags.
"""

__version__ = "0.1.0"
