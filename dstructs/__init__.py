"""Classic data structures: stacks, queues, a binary heap, a hash table, a set, trees and a matrix graph."""

__version__ = "0.1.0"