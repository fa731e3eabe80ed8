"""
Interface layer package.
"""
