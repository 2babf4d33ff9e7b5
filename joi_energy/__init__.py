"""
JOI Energy: smart meter readings store and price plan comparison API.
"""

__version__ = "0.1.0"
