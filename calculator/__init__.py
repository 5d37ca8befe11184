"""
Basic arithmetic calculator with a terminal prompt loop and a browser form
"""

__version__ = "1.0.0"
