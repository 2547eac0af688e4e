"""
Exception hierarchy tests.

Maps to: whisker/exceptions/
"""
