"""
Type-name registry: ORM type names to client data types and validators.

Lookups never fail. A source name with no entry is passed through as the
data type, and a data type with no entry gets no type validator.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ORM / column type name to client data type
# ---------------------------------------------------------------------------

_DATA_TYPE_MAP = {
    # binary family
    'Byte[]': 'Binary',
    'BinaryBlob': 'Binary',
    # date/time variants
    'Timestamp': 'DateTime',
    'UtcDateTime': 'DateTime',
    'LocalDateTime': 'DateTime',
    'TimeAsTimeSpan': 'Time',

    # SQLAlchemy generic and SQL-standard types
    'Integer': 'Int32',
    'INTEGER': 'Int32',
    'INT': 'Int32',
    'BigInteger': 'Int64',
    'BIGINT': 'Int64',
    'SmallInteger': 'Int16',
    'SMALLINT': 'Int16',
    'String': 'String',
    'Text': 'String',
    'Unicode': 'String',
    'UnicodeText': 'String',
    'VARCHAR': 'String',
    'NVARCHAR': 'String',
    'CHAR': 'String',
    'TEXT': 'String',
    'Enum': 'String',
    'Boolean': 'Boolean',
    'BOOLEAN': 'Boolean',
    'Numeric': 'Decimal',
    'NUMERIC': 'Decimal',
    'DECIMAL': 'Decimal',
    'Float': 'Double',
    'FLOAT': 'Double',
    'Double': 'Double',
    'REAL': 'Single',
    'Date': 'DateTime',
    'DATE': 'DateTime',
    'DATETIME': 'DateTime',
    'TIMESTAMP': 'DateTime',
    'TIME': 'Time',
    'Interval': 'Time',
    'LargeBinary': 'Binary',
    'BLOB': 'Binary',
    'VARBINARY': 'Binary',
    'Uuid': 'Guid',
    'UUID': 'Guid',

    # Python builtins, used for developer-declared members
    'int': 'Int64',
    'str': 'String',
    'bool': 'Boolean',
    'float': 'Double',
    'bytes': 'Binary',
    'datetime': 'DateTime',
    'date': 'DateTime',
    'time': 'Time',
    'timedelta': 'Time',
}

# ---------------------------------------------------------------------------
# Client data type to validator name
# ---------------------------------------------------------------------------

_VALIDATOR_MAP = {
    'Boolean': 'bool',
    'Byte': 'byte',
    'DateTime': 'date',
    'DateTimeOffset': 'date',
    'Decimal': 'number',
    'Guid': 'guid',
    'Int16': 'int16',
    'Int32': 'int32',
    'Int64': 'integer',
    'Single': 'number',
    'Time': 'duration',
    'TimeAsTimeSpan': 'duration',
}


def resolve_data_type(source_name: str) -> str:
    """Return the client data type for an ORM type name."""
    data_type = _DATA_TYPE_MAP.get(source_name)
    if data_type is None:
        logger.debug("No client data type for %r, passing it through", source_name)
        return source_name
    return data_type


def resolve_validator(data_type: str) -> Optional[str]:
    """Return the validator name for a client data type, if it has one."""
    return _VALIDATOR_MAP.get(data_type)
