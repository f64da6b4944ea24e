"""
Movies API application package.

This package contains the read-only HTTP API over the movies and ratings
datasets, including the query layer, response models, and utilities.
"""

__version__ = "1.0.0"
