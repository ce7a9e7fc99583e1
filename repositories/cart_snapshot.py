import logging

from sqlalchemy import select, update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from db import get_db_session
from exceptions.cart import CartPersistenceException
from models.cart_snapshot import CartSnapshot

logger = logging.getLogger(__name__)


class CartSnapshotRepository:
    """
    Repository for serialized carts kept in the local SQL database.

    Provides get/set/delete over the CartSnapshot key-value table. Backend
    errors are wrapped in CartPersistenceException; callers decide whether
    they are fatal (the cart store treats them as warnings).
    """

    def __init__(self, session_maker: sessionmaker[Session]):
        self.session_maker = session_maker

    def get(self, key: str) -> str | None:
        """
        Get the serialized cart stored under key.

        Args:
            key: Snapshot key (e.g., "cart")

        Returns:
            Stored JSON string, or None if no snapshot exists

        Raises:
            CartPersistenceException: If the database can't be read
        """
        try:
            with get_db_session(self.session_maker) as session:
                snapshot = session.execute(select(CartSnapshot).where(CartSnapshot.key == key)).scalar()
                return snapshot.value if snapshot else None
        except SQLAlchemyError as e:
            raise CartPersistenceException(key, "read", str(e)) from e

    def set(self, key: str, value: str) -> None:
        """
        Store a serialized cart (insert or update).

        Raises:
            CartPersistenceException: If the write fails
        """
        try:
            with get_db_session(self.session_maker) as session:
                existing = session.execute(select(CartSnapshot.key).where(CartSnapshot.key == key)).scalar()
                if existing is not None:
                    session.execute(update(CartSnapshot).where(CartSnapshot.key == key).values(value=value))
                else:
                    session.add(CartSnapshot(key=key, value=value))
                session.commit()
        except SQLAlchemyError as e:
            raise CartPersistenceException(key, "write", str(e)) from e

    def delete(self, key: str) -> None:
        """
        Delete the snapshot row. Deleting a missing key is not an error.

        Raises:
            CartPersistenceException: If the delete fails
        """
        try:
            with get_db_session(self.session_maker) as session:
                session.execute(delete(CartSnapshot).where(CartSnapshot.key == key))
                session.commit()
        except SQLAlchemyError as e:
            raise CartPersistenceException(key, "delete", str(e)) from e
        logger.debug(f"[CartSnapshot] Deleted snapshot '{key}'")
