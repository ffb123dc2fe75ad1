from metadata.type_map import resolve_data_type, resolve_validator


class TestDataTypes:
    def test_orm_names_are_mapped(self):
        assert resolve_data_type('Byte[]') == 'Binary'
        assert resolve_data_type('BinaryBlob') == 'Binary'
        assert resolve_data_type('Timestamp') == 'DateTime'
        assert resolve_data_type('UtcDateTime') == 'DateTime'
        assert resolve_data_type('LocalDateTime') == 'DateTime'
        assert resolve_data_type('TimeAsTimeSpan') == 'Time'

    def test_sqlalchemy_names_are_mapped(self):
        assert resolve_data_type('Integer') == 'Int32'
        assert resolve_data_type('BigInteger') == 'Int64'
        assert resolve_data_type('Numeric') == 'Decimal'
        assert resolve_data_type('Enum') == 'String'
        assert resolve_data_type('LargeBinary') == 'Binary'
        assert resolve_data_type('Uuid') == 'Guid'

    def test_python_builtins_are_mapped(self):
        assert resolve_data_type('int') == 'Int64'
        assert resolve_data_type('str') == 'String'
        assert resolve_data_type('bool') == 'Boolean'

    def test_unknown_name_passes_through(self):
        assert resolve_data_type('Int32') == 'Int32'
        assert resolve_data_type('DateTime') == 'DateTime'
        assert resolve_data_type('GeographyPoint') == 'GeographyPoint'


class TestValidators:
    def test_known_types(self):
        assert resolve_validator('Int32') == 'int32'
        assert resolve_validator('Int64') == 'integer'
        assert resolve_validator('DateTime') == 'date'
        assert resolve_validator('Guid') == 'guid'
        assert resolve_validator('Time') == 'duration'
        assert resolve_validator('Decimal') == 'number'

    def test_string_has_no_type_validator(self):
        assert resolve_validator('String') is None
        assert resolve_validator('Binary') is None
