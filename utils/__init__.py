"""
Input and output helpers.

Modules:
    loader  - JSON edge lists to graphs
    display - Textual reports of search results
"""
