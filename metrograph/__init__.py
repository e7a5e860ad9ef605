"""Station closing sequences for connected metro networks.

Models a metro scheme as a simple graph and computes an order in which the
stations can be closed one at a time so that the stations still open stay
connected until the last one.
"""

__version__ = "0.1.0"
