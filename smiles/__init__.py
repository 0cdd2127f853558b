"""Miles of Smiles customer support service."""

__version__ = "0.1.0"
