"""Shared core components.

This package holds the error hierarchy, logging, settings and record
capability protocols used by every other config_file package.
"""
