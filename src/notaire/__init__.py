"""
Notaire - wallet identity and order/trade signing.
"""

__version__ = "0.1.0"
