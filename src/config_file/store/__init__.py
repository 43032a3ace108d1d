"""Config dispatch components.

This package performs file IO and hands bytes to the bound format codec.
"""
