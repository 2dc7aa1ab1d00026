"""Competitive programming algorithms: string algorithms, segment trees and contest problem solutions."""

__version__ = "0.1.0"