"""
Domain layer package.

Pure models and errors with no I/O.
"""
