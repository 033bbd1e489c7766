"""Hinted half-GCD and Joye-ladder scalar multiplication on BN254 and P-256, with circuit-style checks."""

__version__ = "0.1.0"