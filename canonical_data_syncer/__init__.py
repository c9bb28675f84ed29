"""
canonical_data_syncer - Canonical Data Syncer

Command line front end for syncing exercise tests with the canonical data
in the problem-specifications repository.
"""

__version__ = "0.9.0"
__author__ = "exercism"
__license__ = "MIT"

from .args import ArgumentParser, Conf, Mode, Verbosity

__all__ = [
    "ArgumentParser",
    "Conf",
    "Mode",
    "Verbosity",
]
