"""cyclectl — random directed graph builder with cycle detection."""

__version__ = "0.1.0"
