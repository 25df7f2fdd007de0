"""
djset-cli: a personal track library and set planner for DJs.
"""

__version__ = "0.5.0"
