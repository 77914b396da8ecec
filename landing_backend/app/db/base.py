"""
Declarative base shared by every ORM model
"""
import uuid

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def generate_uuid() -> str:
    """Primary key factory for every table (UUID4 as text)."""
    return str(uuid.uuid4())
