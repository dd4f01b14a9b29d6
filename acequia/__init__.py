"""Water-management simulation of regions, water sources and canals, with a canal strategy and commands to generate values and run it."""

__version__ = "0.1.0"