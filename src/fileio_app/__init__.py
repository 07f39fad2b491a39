"""
fileio app - command-line SQL runner with the fileio functions loaded.
"""

__version__ = "0.1.0"
