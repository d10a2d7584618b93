"""
fetchlist: download every URL listed in a text file into a local directory.
"""

__version__ = "1.0.0"
