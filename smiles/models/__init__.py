"""Data models for the Miles of Smiles service."""

from smiles.models.booking import Booking, Customer

__all__ = ["Booking", "Customer"]
