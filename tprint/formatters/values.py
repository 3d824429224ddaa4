"""
Value formatting for tprint

Converts typed values to display strings using printf-style templates.
"""
import re
from typing import Union

from tprint.table.align import ValueKind
from tprint.utils.exceptions import FormatError

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1
UINT64_MAX = 2 ** 64 - 1

UNSIGNED_CONVERSIONS = 'uoxX'

DEFAULT_TEMPLATES = {
    ValueKind.INT32: '%d',
    ValueKind.UINT64: '%llu',
    ValueKind.STRING: '%s',
    ValueKind.DOUBLE: '%0.3f',
}

# Conversions each kind may be rendered with
ALLOWED_CONVERSIONS = {
    ValueKind.INT32: 'diuoxX',
    ValueKind.UINT64: 'diuoxX',
    ValueKind.STRING: 's',
    ValueKind.DOUBLE: 'fFeEgG',
}

_CONVERSION_RE = re.compile(
    r'%(?P<flags>[-+ #0]*)'
    r'(?P<width>\*|\d+)?'
    r'(?:\.(?P<precision>\*|\d*))?'
    r'(?P<length>hh|h|ll|l|L|q|j|z|t)?'
    r'(?P<conversion>.?)'
)


def _compile_template(template: str, kind: ValueKind):
    """Validate a template against a value kind

    Args:
        template: printf-style template with a single conversion
        kind: Value kind the template will be applied to

    Returns:
        (template, conversion): the template with C length modifiers stripped,
        usable with the % operator, and its conversion character

    Raises:
        FormatError: If the template is malformed or does not fit the kind
    """
    if not isinstance(template, str):
        raise FormatError(f"Template must be a string, got {type(template).__name__}")

    parts = []
    conversions = 0
    found = None
    pos = 0

    for match in _CONVERSION_RE.finditer(template):
        parts.append(template[pos:match.start()])
        pos = match.end()

        conversion = match.group('conversion')
        if conversion == '%' and match.group(0) == '%%':
            parts.append('%%')
            continue

        if not conversion:
            raise FormatError(f"Incomplete conversion in template {template!r}")
        if match.group('width') == '*' or match.group('precision') == '*':
            raise FormatError(f"'*' width/precision not supported in template {template!r}")
        if conversion not in ALLOWED_CONVERSIONS[kind]:
            raise FormatError(
                f"Conversion '%{conversion}' does not fit {kind.value} values "
                f"(template {template!r})"
            )
        if conversion == 'o' and '#' in match.group('flags'):
            raise FormatError(f"'%#o' is not supported in template {template!r}")

        conversions += 1
        found = conversion
        precision = match.group('precision')
        fields = match.group('flags') + (match.group('width') or '')
        if precision is not None:
            fields += '.' + precision
        parts.append('%' + fields + conversion)

    parts.append(template[pos:])

    if conversions != 1:
        raise FormatError(
            f"Template {template!r} must contain exactly one conversion, found {conversions}"
        )

    return ''.join(parts), found


def validate_template(template: str, kind: ValueKind):
    """Check that a template can format values of the given kind

    Raises:
        FormatError: If the template does not fit the kind
    """
    _compile_template(template, kind)


def _check_value(value, kind: ValueKind):
    if kind in (ValueKind.INT32, ValueKind.UINT64):
        if isinstance(value, bool) or not isinstance(value, int):
            raise FormatError(f"Expected an integer for {kind.value}, got {type(value).__name__}")
        if kind is ValueKind.INT32 and not INT32_MIN <= value <= INT32_MAX:
            raise FormatError(f"Value {value} out of int32 range")
        if kind is ValueKind.UINT64 and not 0 <= value <= UINT64_MAX:
            raise FormatError(f"Value {value} out of uint64 range")
    elif kind is ValueKind.DOUBLE:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise FormatError(f"Expected a number for double, got {type(value).__name__}")
    elif not isinstance(value, str):
        raise FormatError(f"Expected a string, got {type(value).__name__}")


def format_value(template: str, value: Union[int, float, str], kind: ValueKind) -> str:
    """Format a typed value using a printf-style template

    Args:
        template: Template with exactly one conversion (e.g. "%0.3f")
        value: Value to substitute
        kind: Kind of the value

    Returns:
        Formatted display string

    Raises:
        FormatError: If the template or the value does not fit the kind
    """
    compiled, conversion = _compile_template(template, kind)
    _check_value(value, kind)
    if kind is ValueKind.DOUBLE:
        value = float(value)
    elif kind is ValueKind.INT32 and conversion in UNSIGNED_CONVERSIONS:
        # unsigned conversions print the two's complement bits, as printf does
        value &= 0xFFFFFFFF
    return compiled % (value,)
