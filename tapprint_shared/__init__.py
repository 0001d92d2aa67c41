"""
Top-level package for the TapPrint shared contracts.

Provides the payload shapes exchanged between the TapPrint client and server,
plus the schema and validation tooling used at the network boundary.
"""

__version__ = "0.1.0"
