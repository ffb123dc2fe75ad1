from .metadata_service import MetadataService

__all__ = ['MetadataService']
