"""
termclock - a terminal clock with big digits and an analog face.
"""

__version__ = "0.3.0"
