"""
Client-facing metadata document.

Field names produced by ``to_dict()`` are the wire format read by the
Breeze client and must not change. Dict and list insertion order is kept
so that rebuilding from the same mappings yields identical output.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

DEFAULT_COMPARISON_OPTIONS = 'caseInsensitiveSQL'


@dataclass
class Validator:
    name: str
    max_length: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.max_length is not None:
            return {'maxLength': self.max_length, 'name': self.name}
        return {'name': self.name}


@dataclass
class DataProperty:
    """Scalar or complex-typed member of a structural type."""
    name_on_server: Optional[str]
    data_type: Optional[str] = None
    complex_type_name: Optional[str] = None
    is_nullable: bool = True
    name: Optional[str] = None
    default_value: Any = None
    is_part_of_key: bool = False
    is_concurrency_token: bool = False
    max_length: Optional[int] = None
    validators: List[Validator] = field(default_factory=list)
    is_unmapped: bool = False

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {}
        if self.name_on_server:
            d['nameOnServer'] = self.name_on_server
        if self.complex_type_name is not None:
            d['complexTypeName'] = self.complex_type_name
        else:
            d['dataType'] = self.data_type
        d['isNullable'] = self.is_nullable
        if self.name:
            d['name'] = self.name
        if self.default_value is not None:
            d['defaultValue'] = self.default_value
        if self.is_part_of_key:
            d['isPartOfKey'] = True
        if self.is_concurrency_token:
            d['concurrencyMode'] = 'Fixed'
        if self.max_length is not None:
            d['maxLength'] = self.max_length
        if self.validators:
            d['validators'] = [v.to_dict() for v in self.validators]
        if self.is_unmapped:
            d['isUnmapped'] = True
        return d


@dataclass
class NavigationProperty:
    name_on_server: str
    entity_type_name: str
    is_scalar: bool
    association_name: str
    has_orphan_delete: Optional[bool] = None
    name: Optional[str] = None
    foreign_key_names_on_server: Optional[List[str]] = None
    inv_foreign_key_names_on_server: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            'nameOnServer': self.name_on_server,
            'entityTypeName': self.entity_type_name,
            'isScalar': self.is_scalar,
            'associationName': self.association_name,
        }
        if self.has_orphan_delete is not None:
            d['hasOrphanDelete'] = self.has_orphan_delete
        if self.name:
            d['name'] = self.name
        if self.foreign_key_names_on_server is not None:
            d['foreignKeyNamesOnServer'] = list(self.foreign_key_names_on_server)
        if self.inv_foreign_key_names_on_server is not None:
            d['invForeignKeyNamesOnServer'] = list(self.inv_foreign_key_names_on_server)
        return d


@dataclass
class TypeNode:
    """An entity type, or a complex type when ``is_complex_type`` is set."""
    short_name: str
    namespace: str
    is_complex_type: bool = False
    base_type_name: Optional[str] = None
    auto_generated_key_type: Optional[str] = None
    default_resource_name: Optional[str] = None
    data_properties: List[DataProperty] = field(default_factory=list)
    navigation_properties: List[NavigationProperty] = field(default_factory=list)

    @property
    def key(self) -> str:
        return f"{self.short_name}:#{self.namespace}"

    def find_data_property(self, name: str) -> Optional[DataProperty]:
        return next((p for p in self.data_properties if p.name_on_server == name), None)

    def find_navigation_property(self, name: str) -> Optional[NavigationProperty]:
        return next((p for p in self.navigation_properties if p.name_on_server == name), None)

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {'shortName': self.short_name, 'namespace': self.namespace}
        if self.is_complex_type:
            d['isComplexType'] = True
            d['dataProperties'] = [p.to_dict() for p in self.data_properties]
            return d
        if self.base_type_name:
            d['baseTypeName'] = self.base_type_name
        if self.auto_generated_key_type:
            d['autoGeneratedKeyType'] = self.auto_generated_key_type
        d['defaultResourceName'] = self.default_resource_name
        d['dataProperties'] = [p.to_dict() for p in self.data_properties]
        d['navigationProperties'] = [p.to_dict() for p in self.navigation_properties]
        return d


@dataclass
class EnumType:
    short_name: str
    namespace: str
    values: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'shortName': self.short_name,
            'namespace': self.namespace,
            'values': list(self.values),
        }


@dataclass
class SchemaDocument:
    """The finished metadata, plus the server-side foreign-key index.

    ``foreign_key_map`` maps ``"{ContainingType}.{Property}"`` to the
    comma-joined FK column names and is never sent to the client.
    """
    local_query_comparison_options: str = DEFAULT_COMPARISON_OPTIONS
    structural_types: List[TypeNode] = field(default_factory=list)
    resource_entity_type_map: Dict[str, str] = field(default_factory=dict)
    enum_types: List[EnumType] = field(default_factory=list)
    foreign_key_map: Dict[str, str] = field(default_factory=dict)

    def get_type(self, key: str) -> Optional[TypeNode]:
        return next((t for t in self.structural_types if t.key == key), None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'localQueryComparisonOptions': self.local_query_comparison_options,
            'structuralTypes': [t.to_dict() for t in self.structural_types],
            'resourceEntityTypeMap': dict(self.resource_entity_type_map),
            'enumTypes': [e.to_dict() for e in self.enum_types],
        }

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.to_dict(), default=str, **kwargs)
