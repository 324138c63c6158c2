"""
Dineout Offer Finder: fuzzy card lookup and cross-platform dining offer reconciliation.
"""

__version__ = "1.0.0"
