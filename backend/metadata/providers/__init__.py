from .base import MetadataProvider, StaticMetadataProvider
from .sqlalchemy_provider import SQLAlchemyMetadataProvider

__all__ = [
    'MetadataProvider',
    'StaticMetadataProvider',
    'SQLAlchemyMetadataProvider',
]
