"""Strongly connected components of shrinking induced subgraphs (Johnson/Tarjan)"""

__version__ = "0.1.0"
