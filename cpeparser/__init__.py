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

from cpeparser.cpe import CPE_FIELDS, Cpe
from cpeparser.parser import FORMATTED_BINDING_PREFIX, URI_BINDING_PREFIX, URI_EXTENDED_ATTRIBUTES_DELIMITER, has_formatted_binding, has_uri_binding, parse, stringify

__all__ = [
    'CPE_FIELDS',
    'Cpe',
    'FORMATTED_BINDING_PREFIX',
    'URI_BINDING_PREFIX',
    'URI_EXTENDED_ATTRIBUTES_DELIMITER',
    'has_formatted_binding',
    'has_uri_binding',
    'parse',
    'stringify',
]
