"""
Projects - console manager for DIY projects and their materials, steps and categories.
"""

__version__ = "0.1.0"
