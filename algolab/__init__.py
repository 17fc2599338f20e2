"""Queues, graphs with topological sort, linked lists, chained hash tables, random data and sorts."""

__version__ = "0.1.0"
__all__ = ["fifo", "graph", "linked_list", "hashing", "random_data", "sorting"]