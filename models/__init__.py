"""
Models Package

This file ensures all SQLAlchemy models are imported and registered
before Base.metadata.create_all() runs.
"""

from models.base import Base
from models.cart_snapshot import CartSnapshot

__all__ = [
    'Base',
    'CartSnapshot',
]
