"""Client library for the z/OSMF REST files API for z/OS datasets."""

__version__ = "0.1.0"