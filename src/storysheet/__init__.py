"""
storysheet: append nickname/story submissions to a Google Sheet.
"""

__version__ = "0.1.0"
