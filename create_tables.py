# create_tables.py
import argparse
import logging

from app.database import Base, engine
import app.models  # noqa: F401  registers every table on Base.metadata

logger = logging.getLogger(__name__)

def create_tables(drop: bool = False):
    """Create all tables, optionally dropping the existing ones first"""
    if drop:
        Base.metadata.drop_all(bind=engine)
        logger.info("Dropped existing tables")

    Base.metadata.create_all(bind=engine)
    logger.info("✅ All tables created successfully!")

def main(argv=None):
    parser = argparse.ArgumentParser(description="Create the Task Management API schema")
    parser.add_argument("--drop", action="store_true", help="drop existing tables before creating them")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    create_tables(drop=args.drop)

if __name__ == "__main__":
    main()
