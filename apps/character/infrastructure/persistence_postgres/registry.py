"""SQLAlchemy mapper registry (character 스키마)."""

from sqlalchemy import MetaData
from sqlalchemy.orm import registry

metadata = MetaData(schema="character")
mapper_registry = registry(metadata=metadata)
