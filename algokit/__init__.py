"""Classic algorithms and data structures: sequences, coins, knapsack, arrays,
heaps, tries, graphs, binary trees, binary search trees and grid searches."""

__version__ = "0.1.0"