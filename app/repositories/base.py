# app/repositories/base.py
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class SessionRepository:
    """Store object bound to one request's session"""

    def __init__(self, db: Session):
        self.db = db

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            logger.error(f"{type(self).__name__}: commit failed, rolling back")
            self.db.rollback()
            raise
