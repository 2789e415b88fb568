"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the graph core to:
- Road-network storage (CSV files)
- Route solvers (BFS, Dijkstra, A*)
"""
