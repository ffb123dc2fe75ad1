"""
Per-type and per-member overrides read by the metadata builder.

Configuration is keyed by type key (``Name:#Namespace``). Anything not
configured resolves to an empty configuration, so lookups never fail.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .descriptors import TypeRef


@dataclass
class MemberConfiguration:
    """Overrides for one member of a type.

    ``data_type`` and ``is_nullable`` only matter for custom members, which
    have no mapping to take them from.
    """
    name: str
    ignored: bool = False
    serialized_name: Optional[str] = None
    default_value: Any = None
    is_custom: bool = False
    data_type: Any = 'String'
    is_nullable: bool = True

    @property
    def data_type_name(self) -> str:
        if isinstance(self.data_type, type):
            return self.data_type.__name__
        return str(self.data_type)


@dataclass
class ModelConfiguration:
    resource_name: Optional[str] = None
    members: Dict[str, MemberConfiguration] = field(default_factory=dict)


class ModelConfigurator:
    """In-memory registry of model and member configuration."""

    def __init__(self):
        self._models: Dict[str, ModelConfiguration] = {}

    def configure_model(self, type_ref: TypeRef,
                        resource_name: Optional[str] = None) -> ModelConfiguration:
        model = self._models.setdefault(type_ref.key, ModelConfiguration())
        if resource_name is not None:
            model.resource_name = resource_name
        return model

    def configure_member(self, type_ref: TypeRef, name: str, **options) -> MemberConfiguration:
        model = self.configure_model(type_ref)
        member = model.members.get(name)
        if member is None:
            member = MemberConfiguration(name=name)
            model.members[name] = member
        for key, value in options.items():
            if not hasattr(member, key):
                raise AttributeError(f"Unknown member option '{key}'")
            setattr(member, key, value)
        return member

    def get_model_configuration(self, type_ref: TypeRef) -> ModelConfiguration:
        return self._models.get(type_ref.key) or ModelConfiguration()

    def get_member_configuration(self, type_ref: TypeRef,
                                 name: Optional[str]) -> MemberConfiguration:
        if name is None:
            return MemberConfiguration(name='')
        model = self._models.get(type_ref.key)
        if model is not None and name in model.members:
            return model.members[name]
        return MemberConfiguration(name=name)
