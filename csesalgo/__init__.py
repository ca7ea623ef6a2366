"""Classic algorithms for dynamic programming, graphs, trees, arrays and number theory."""

__version__ = "0.1.0"
__all__ = ["introductory", "dynamic", "graphs", "trees", "arrays", "maths"]