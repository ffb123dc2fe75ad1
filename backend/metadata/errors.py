"""Errors raised while building metadata. All of them abort the build."""

from typing import Dict, List, Optional, Sequence


class MetadataBuildError(Exception):
    """Base class for mapping configuration defects found during a build."""

    def __init__(self, message: str, entity: Optional[str] = None,
                 property_name: Optional[str] = None,
                 columns: Optional[Sequence[str]] = None):
        super().__init__(message)
        self.entity = entity
        self.property_name = property_name
        self.columns: List[str] = list(columns or [])

    def to_dict(self) -> Dict:
        return {
            'error': str(self),
            'error_type': type(self).__name__,
            'entity': self.entity,
            'property': self.property_name,
            'columns': self.columns,
        }


class UnresolvableForeignKeyError(MetadataBuildError):
    """No property on either side of an association maps its FK columns."""
    pass


class UnknownRelatedTypeError(MetadataBuildError):
    """A collection association whose element type cannot be determined."""
    pass


class MissingEntityMetadataError(MetadataBuildError):
    """The provider has no descriptor for a type the builder needs."""
    pass


class DuplicateTypeError(MetadataBuildError):
    """Two entity descriptors share a type key."""
    pass


class DuplicateResourceNameError(MetadataBuildError):
    """Two entity types resolve to the same resource name."""
    pass


class DuplicateForeignKeyError(MetadataBuildError):
    """The same association was recorded twice in the foreign-key map."""
    pass


class UnsupportedComplexTypeError(MetadataBuildError):
    """Embedded types may not contain associations."""
    pass
