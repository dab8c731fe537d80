"""
Pure algorithms with no dashboard-specific dependencies.

Modules:
    traversal   - Breadth-first traversal of trees and graphs
"""
