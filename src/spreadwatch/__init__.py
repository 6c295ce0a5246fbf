"""
SpreadWatch: futures spread monitor.

A small async dashboard comparing MEXC perpetual prices against seven
other exchanges, with deposit status and the token's main DEX pair.
"""

__version__ = "1.0.0"
