"""
CLI (Command Line Interface) for Eve Compare Fits.

This is a thin wrapper around the fit engine. All parsing and comparison
logic lives in the engine package.
"""
