"""Gaussian-process motion priors, interpolation, penalties, spline segments and numeric utilities."""

__version__ = "0.1.0"