"""Post-processing of Doxygen-generated HTML for BDE-style documentation."""

__version__ = "0.1.0"
