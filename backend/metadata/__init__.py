"""
Breeze metadata builder for ORM-mapped models.

Turns ORM mapping descriptors into the metadata document a Breeze client
uses to query, validate and save entities.
"""
from .builder import MetadataBuilder
from .configuration import MemberConfiguration, ModelConfiguration, ModelConfigurator
from .descriptors import (
    ComponentDescriptor, EntityDescriptor, EnumDescriptor, KeyGeneration,
    PropertyDescriptor, SyntheticProperty, TypeRef,
)
from .errors import (
    DuplicateForeignKeyError, DuplicateResourceNameError, DuplicateTypeError,
    MetadataBuildError, MissingEntityMetadataError, UnknownRelatedTypeError,
    UnresolvableForeignKeyError, UnsupportedComplexTypeError,
)
from .pluralizer import Pluralizer
from .schema import SchemaDocument

__all__ = [
    'MetadataBuilder',
    'MemberConfiguration', 'ModelConfiguration', 'ModelConfigurator',
    'ComponentDescriptor', 'EntityDescriptor', 'EnumDescriptor', 'KeyGeneration',
    'PropertyDescriptor', 'SyntheticProperty', 'TypeRef',
    'DuplicateForeignKeyError', 'DuplicateResourceNameError', 'DuplicateTypeError',
    'MetadataBuildError', 'MissingEntityMetadataError', 'UnknownRelatedTypeError',
    'UnresolvableForeignKeyError', 'UnsupportedComplexTypeError',
    'Pluralizer',
    'SchemaDocument',
]
