"""
Design pattern exercises: a fluent Markdown builder and a performance
monitoring proxy.
"""

__version__ = "0.1.0"
