"""Classic algorithms: sorting, string matching, knapsack and rod cutting, graph colouring, flow, vertex cover and job assignment."""

__version__ = "0.1.0"