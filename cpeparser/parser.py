# Copyright (C) 2020 Dmitry Marakasov <amdmi3@amdmi3.ru>
#
# This file is part of repology
#
# repology is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# repology is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with repology.  If not, see <http://www.gnu.org/licenses/>.

import re
from typing import Any, List, Literal, Optional

from cpeparser.cpe import Cpe


URI_BINDING_PREFIX = 'cpe:/'
FORMATTED_BINDING_PREFIX = 'cpe:2.3:'
URI_EXTENDED_ATTRIBUTES_DELIMITER = ':~'

_WILDCARD = '*'
_WHITESPACE_RE = re.compile(r'\s')


def has_uri_binding(cpe: Any) -> bool:
    return isinstance(cpe, str) and cpe.startswith(URI_BINDING_PREFIX)


def has_formatted_binding(cpe: Any) -> bool:
    return isinstance(cpe, str) and cpe.startswith(FORMATTED_BINDING_PREFIX)


def _strip_binding_prefix(cpe: str) -> str:
    if has_formatted_binding(cpe):
        return cpe[len(FORMATTED_BINDING_PREFIX):]

    if has_uri_binding(cpe):
        return cpe[len(URI_BINDING_PREFIX):]

    return cpe


def _split_attributes(cpe: str, attributes_str: str) -> List[str]:
    """Split attribute substring into positional tokens.

    In URI binding, edition may hold packed extended attributes
    (`~edition~sw_edition~target_sw~target_hw~other`, see NISTIR 7695
    section 6.1.3.5). The packed tail takes the place of the last
    token, each of its `~`-separated segments (including the empty
    one before the leading `~`) becoming a token of its own, with
    empty segments turned into wildcards.
    """
    attributes = attributes_str.split(':')

    if not has_uri_binding(cpe) or URI_EXTENDED_ATTRIBUTES_DELIMITER not in cpe:
        return attributes

    packed = [attribute for attribute in attributes if attribute.startswith('~')]
    if not packed:
        return attributes

    return attributes[:-1] + [value or _WILDCARD for value in packed[-1].split('~')]


def _parse_attribute_value(value: Any) -> str:
    # XXX: backslash-quoted characters are passed through as is
    if not isinstance(value, str) or not value:
        return ''
    return value.strip().replace('_', ' ')


def _format_attribute_value(value: str) -> str:
    return _WHITESPACE_RE.sub('_', value)


def parse(cpe: str) -> Cpe:
    """Parse CPE name in either URI or formatted binding.

    Never fails: strings without a known prefix are treated as a
    bare attribute list, and missing attributes are left empty.
    """
    cpe = cpe.strip()

    attributes = _split_attributes(cpe, _strip_binding_prefix(cpe))

    return Cpe.from_fields(map(_parse_attribute_value, attributes))


def stringify(cpe: Cpe, prefix: Optional[Literal['formatted', 'uri']] = None) -> str:
    """Produce colon-separated CPE name with all 11 attributes.

    Extended attributes are never packed back, so with `uri` prefix
    the result is not a canonical URI binding.
    """
    values = ':'.join(
        _format_attribute_value(value) if value else ''
        for value in cpe.fields()
    )

    if prefix:
        return (FORMATTED_BINDING_PREFIX if prefix == 'formatted' else URI_BINDING_PREFIX) + values

    return values
