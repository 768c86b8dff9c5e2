"""METS/MODS metadata extraction for digitization workflows."""

__version__ = "0.1.0"
