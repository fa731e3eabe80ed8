"""
CLI main entry point.
"""


def main() -> int:
    """
    Main entry point for the regcreds CLI.

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    # Import here to avoid circular imports
    from .orchestrator import app
    app()
    return 0
