"""
Graph models — nodes, weighted edges and the graph store.
"""
