"""Construction of data-property entries, scalar and complex."""

from typing import List, Optional

from .configuration import MemberConfiguration
from .descriptors import EnumDescriptor, PropertyDescriptor, TypeRef
from .schema import DataProperty, Validator
from .type_map import resolve_data_type, resolve_validator


def make_data_property(ctx, config: Optional[MemberConfiguration], name: Optional[str],
                       type_ref: TypeRef, is_nullable: bool, length: Optional[int] = None,
                       is_key: bool = False, is_version: bool = False,
                       enum: Optional[EnumDescriptor] = None) -> DataProperty:
    """Build one scalar data property.

    Validators are emitted in a fixed order: required, maxLength, then the
    data type's own validator.
    """
    data_type = resolve_data_type(type_ref.name)
    dmap = DataProperty(name_on_server=name, data_type=data_type, is_nullable=is_nullable)

    if config is not None:
        if config.serialized_name:
            dmap.name = config.serialized_name
        if config.default_value is not None:
            dmap.default_value = config.default_value

    dmap.is_part_of_key = is_key
    dmap.is_concurrency_token = is_version

    validators: List[Validator] = []
    if not is_nullable:
        validators.append(Validator(name='required'))
    if length is not None:
        dmap.max_length = length
        validators.append(Validator(name='maxLength', max_length=length))
    validation_type = resolve_validator(data_type)
    if validation_type:
        validators.append(Validator(name=validation_type))
    dmap.validators = validators

    if enum is not None:
        ctx.add_enum(enum)

    return dmap


def data_property_for(ctx, owner: TypeRef, prop: PropertyDescriptor, is_key: bool = False,
                      is_version: bool = False, is_nullable: Optional[bool] = None) -> DataProperty:
    """make_data_property() for a mapped property, using its member configuration."""
    return make_data_property(
        ctx, ctx.member_config(owner, prop.name), prop.name, prop.type,
        prop.nullable if is_nullable is None else is_nullable,
        length=prop.length, is_key=is_key, is_version=is_version, enum=prop.enum)


def make_complex_property(config: Optional[MemberConfiguration], name: str,
                          complex_type_name: str, is_nullable: bool) -> DataProperty:
    dmap = DataProperty(name_on_server=name, complex_type_name=complex_type_name,
                        is_nullable=is_nullable)
    if config is not None and config.serialized_name:
        dmap.name = config.serialized_name
    return dmap


def find_property_by_name(properties: List[DataProperty], name: str) -> Optional[DataProperty]:
    for prop in properties:
        if prop.name_on_server == name:
            return prop
    return None
