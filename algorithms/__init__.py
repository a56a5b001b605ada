"""
Algorithms package for the Algorithm Demonstrations.
Contains in-place quicksort, top-down merge sort and the 0/1 knapsack solver.
"""
