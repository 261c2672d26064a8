"""
SCEUDL: calendar grid with drag/resize editing and AI study-plan import.
"""

__version__ = "0.1.0"
