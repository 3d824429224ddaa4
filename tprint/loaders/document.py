"""
Table document loaders for tprint

A YAML document declares columns (caption, alignment, value kind), rows and
optional format overrides. A CSV document is a header line followed by rows of
strings.
"""
import csv
from typing import List, Optional, TextIO

import yaml

from tprint.table.align import Alignment, ValueKind
from tprint.table.table import Table
from tprint.utils.exceptions import DocumentException
from tprint.utils.logger import get_logger

logger = get_logger(__name__)

_APPENDERS = {
    ValueKind.INT32: Table.append_int32,
    ValueKind.UINT64: Table.append_uint64,
    ValueKind.STRING: Table.append_string,
    ValueKind.DOUBLE: Table.append_double,
}


def _parse_enum(enum_cls, value, what: str):
    try:
        return enum_cls.parse(value)
    except ValueError:
        raise DocumentException(f"Unknown {what}: {value!r}")


def load_yaml(table: Table, stream: TextIO, caption_align: Alignment = Alignment.LEFT,
              data_align: Alignment = Alignment.LEFT):
    """Fill a table from a YAML document

    Args:
        table: Empty table to fill
        stream: Readable YAML text
        caption_align: Caption alignment for columns that do not set one
        data_align: Data alignment for columns that do not set one

    Raises:
        DocumentException: If the document is malformed
    """
    try:
        document = yaml.safe_load(stream) or {}
    except yaml.YAMLError as e:
        raise DocumentException(f"Invalid YAML: {e}")

    if not isinstance(document, dict) or not isinstance(document.get('columns'), list):
        raise DocumentException("Document must contain a 'columns' list")

    formats = document.get('formats') or {}
    if not isinstance(formats, dict):
        raise DocumentException("'formats' must be a mapping")
    for name, template in formats.items():
        table.set_format(_parse_enum(ValueKind, name, 'value kind'), template)

    kinds: List[ValueKind] = []
    for definition in document['columns']:
        if isinstance(definition, str):
            definition = {'caption': definition}
        if not isinstance(definition, dict):
            raise DocumentException(f"Invalid column definition: {definition!r}")

        caption = definition.get('caption')
        table.add_column(
            None if caption is None else str(caption),
            _parse_enum(Alignment, definition.get('caption_align', caption_align), 'alignment'),
            _parse_enum(Alignment, definition.get('data_align', data_align), 'alignment')
        )
        kinds.append(_parse_enum(ValueKind, definition.get('kind', 'string'), 'value kind'))

    for number, row in enumerate(document.get('rows') or [], start=1):
        if not isinstance(row, list):
            raise DocumentException(f"Row {number} must be a list")
        if len(row) > len(kinds):
            raise DocumentException(
                f"Row {number} has {len(row)} values but only {len(kinds)} columns are defined"
            )
        for index, value in enumerate(row):
            kind = kinds[index]
            if kind is ValueKind.STRING:
                value = '' if value is None else str(value)
            _APPENDERS[kind](table, index, value)

    logger.debug(f"Loaded YAML document: {len(kinds)} columns, {table.row_count} rows")


def load_csv(table: Table, stream: TextIO, caption_align: Alignment = Alignment.LEFT,
             data_align: Alignment = Alignment.LEFT, delimiter: Optional[str] = None):
    """Fill a table from CSV text whose first line holds the captions

    Raises:
        DocumentException: If the CSV is empty or a row is too long
    """
    reader = csv.reader(stream, delimiter=delimiter or ',')
    try:
        header = next(reader)
    except StopIteration:
        raise DocumentException("CSV document is empty")
    except csv.Error as e:
        raise DocumentException(f"Invalid CSV: {e}")

    for caption in header:
        table.add_column(caption, caption_align, data_align)

    try:
        for number, row in enumerate(reader, start=2):
            if len(row) > len(header):
                raise DocumentException(
                    f"Line {number} has {len(row)} fields but the header has {len(header)}"
                )
            for index, value in enumerate(row):
                table.append_string(index, value)
    except csv.Error as e:
        raise DocumentException(f"Invalid CSV: {e}")

    logger.debug(f"Loaded CSV document: {len(header)} columns, {table.row_count} rows")
