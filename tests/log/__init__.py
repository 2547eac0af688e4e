"""
Logging tests.

Maps to: whisker/_logging.py
"""
