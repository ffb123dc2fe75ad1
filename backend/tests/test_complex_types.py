import pytest

from metadata import UnsupportedComplexTypeError
from factories import NS, component, entity, scalar, to_one


def _address(name='Address'):
    return component(name, 'Address', [
        scalar('Street', 'String', length=60, column='street'),
        scalar('City', 'String', length=15, column='city'),
    ])


class TestComplexTypeRegistration:
    def test_registered_once_for_several_owners(self, build):
        customer = entity('Customer', [_address()])
        supplier = entity('Supplier', [_address('Location')])
        document, _ = build([customer, supplier])

        address_key = f'Address:#{NS}'
        complex_types = [t for t in document.structural_types if t.is_complex_type]
        assert [t.key for t in complex_types] == [address_key]

        customer_prop = document.get_type(f'Customer:#{NS}').find_data_property('Address')
        supplier_prop = document.get_type(f'Supplier:#{NS}').find_data_property('Location')
        assert customer_prop.complex_type_name == address_key
        assert supplier_prop.complex_type_name == address_key

    def test_complex_types_come_first(self, build):
        document, _ = build([entity('Customer', [_address()])])
        keys = [t.key for t in document.structural_types]
        assert keys == [f'Address:#{NS}', f'Customer:#{NS}']

    def test_complex_type_wire_shape(self, build):
        document, _ = build([entity('Customer', [_address()])])
        address = document.to_dict()['structuralTypes'][0]

        assert address['shortName'] == 'Address'
        assert address['namespace'] == NS
        assert address['isComplexType'] is True
        assert 'navigationProperties' not in address
        assert address['dataProperties'][0] == {
            'nameOnServer': 'Street',
            'dataType': 'String',
            'isNullable': True,
            'maxLength': 60,
            'validators': [{'maxLength': 60, 'name': 'maxLength'}],
        }

    def test_complex_property_on_owner(self, build):
        document, _ = build([entity('Customer', [_address()])])
        customer = document.get_type(f'Customer:#{NS}')
        assert customer.find_data_property('Address').to_dict() == {
            'nameOnServer': 'Address',
            'complexTypeName': f'Address:#{NS}',
            'isNullable': True,
        }

    def test_nested_complex_type(self, build):
        geo = component('Position', 'GeoPoint', [
            scalar('Latitude', 'Double', column='lat'),
            scalar('Longitude', 'Double', column='lng'),
        ])
        address = component('Address', 'Address', [
            scalar('Street', 'String', column='street'),
            geo,
        ], columns=['street', 'lat', 'lng'])
        document, _ = build([entity('Customer', [address])])

        keys = [t.key for t in document.structural_types]
        assert keys == [f'GeoPoint:#{NS}', f'Address:#{NS}', f'Customer:#{NS}']
        nested = document.get_type(f'Address:#{NS}').find_data_property('Position')
        assert nested.complex_type_name == f'GeoPoint:#{NS}'

    def test_association_inside_complex_type_is_rejected(self, build):
        address = component('Address', 'Address', [
            scalar('Street', 'String', column='street'),
            to_one('Region', 'Region', ['RegionId']),
        ], columns=['street', 'RegionId'])

        with pytest.raises(UnsupportedComplexTypeError) as exc_info:
            build([entity('Customer', [address]), entity('Region')])
        assert exc_info.value.property_name == 'Region'

    def test_sub_properties_come_from_the_component(self, build):
        # owner columns are renamed per owner; the shared type keeps its own members
        address = component('Address', 'Address', [
            scalar('Street', 'String', length=60, column='street'),
            scalar('City', 'String', length=15, column='city'),
        ], columns=['ship_street', 'ship_city'])
        document, _ = build([entity('Shipment', [address])])

        props = document.get_type(f'Address:#{NS}').data_properties
        assert [p.name_on_server for p in props] == ['Street', 'City']
        assert [p.max_length for p in props] == [60, 15]
