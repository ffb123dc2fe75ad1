"""Descriptor builders shared by the metadata tests."""

from metadata import (
    ComponentDescriptor, EntityDescriptor, EnumDescriptor, KeyGeneration,
    PropertyDescriptor, TypeRef,
)

NS = 'Northwind.Models'


def type_ref(name, namespace=NS):
    return TypeRef(name, namespace)


def scalar(name, type_name='Int32', nullable=True, column=None, length=None, enum=None):
    return PropertyDescriptor(name=name, type=TypeRef(type_name, 'System'), nullable=nullable,
                              columns=(column or name,), length=length, enum=enum)


def to_one(name, target, columns, nullable=True, namespace=NS, from_parent=True,
           referenced=(), orphan_delete=False):
    return PropertyDescriptor(name=name, type=TypeRef(target, namespace), nullable=nullable,
                              columns=tuple(columns), is_association=True,
                              referenced_columns=tuple(referenced),
                              foreign_key_from_parent=from_parent,
                              orphan_delete=orphan_delete)


def to_many(name, target, referenced, namespace=NS, many_to_many=False, orphan_delete=False):
    element = TypeRef(target, namespace)
    return PropertyDescriptor(name=name, type=TypeRef('ISet', 'Iesi.Collections', args=(element,)),
                              is_association=True, is_collection=True,
                              referenced_columns=tuple(referenced),
                              many_to_many=many_to_many, orphan_delete=orphan_delete)


def component(name, type_name, parts, columns=None, nullable=True, namespace=NS):
    comp = ComponentDescriptor(type=TypeRef(type_name, namespace), properties=list(parts))
    return PropertyDescriptor(name=name, type=comp.type, nullable=nullable,
                              columns=tuple(columns or [p.columns[0] for p in parts]),
                              is_embedded=True, component=comp)


def entity(name, properties=(), id_name='Id', id_type='Int32', namespace=NS,
           superclass=None, key_generation=KeyGeneration.IDENTITY, **kwargs):
    identifier = None
    key_columns = ()
    if id_name is not None:
        identifier = PropertyDescriptor(name=id_name, type=TypeRef(id_type, 'System'),
                                        nullable=False, columns=(id_name,))
        key_columns = (id_name,)
    return EntityDescriptor(
        type=TypeRef(name, namespace),
        identifier=identifier,
        key_columns=key_columns,
        properties=list(properties),
        superclass=TypeRef(superclass, namespace) if superclass else None,
        key_generation=key_generation,
        **kwargs
    )


def composite_key_entity(name, parts, properties=(), namespace=NS):
    """Entity keyed by an embedded composite identifier, parts in declaration order."""
    comp = ComponentDescriptor(type=TypeRef(f'{name}Key', namespace), properties=list(parts))
    columns = tuple(p.columns[0] for p in parts)
    identifier = PropertyDescriptor(name=None, type=comp.type, nullable=False, columns=columns,
                                    is_embedded=True, component=comp)
    return EntityDescriptor(type=TypeRef(name, namespace), identifier=identifier,
                            key_columns=columns, properties=list(properties),
                            key_generation=KeyGeneration.ASSIGNED)


def order_status_enum():
    return EnumDescriptor(name='OrderStatus', namespace=NS,
                          values=('Pending', 'Shipped', 'Delivered'))


def order_customer_entities(map_customer_id=True):
    """Order -> Customer, with or without a mapped CustomerId scalar on Order."""
    order_props = [to_one('Customer', 'Customer', ['CustomerId'], nullable=False)]
    if map_customer_id:
        order_props.insert(0, scalar('CustomerId', nullable=False))
    customer = entity('Customer', [
        scalar('CompanyName', 'String', nullable=False, length=40),
        to_many('Orders', 'Order', ['CustomerId']),
    ])
    order = entity('Order', order_props)
    return [customer, order]
