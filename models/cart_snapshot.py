from sqlalchemy import Column, String, Text, DateTime, func

from models.base import Base


class CartSnapshot(Base):
    """
    Key-value store for serialized carts.

    Each row holds one complete cart as a JSON array of line items
    under a named key (default: "cart"). Clearing a cart deletes the
    row itself, so a later load behaves as if no cart ever existed.
    """
    __tablename__ = 'cart_snapshots'

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())
