import os
import sys


def get_base_path() -> str:
    """
    Resolve the directory the application keeps its files next to.

    Returns:
        str: the executable's directory when frozen, otherwise the project root
    """
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    # tasktracker/utils.py -> project root is two levels up
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def get_data_dir() -> str:
    """Writable directory for the database, cache files and logs."""
    return os.path.join(get_base_path(), "data")
