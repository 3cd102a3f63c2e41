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

from dataclasses import astuple, dataclass
from typing import Iterable, List, Tuple


CPE_FIELDS: Tuple[str, ...] = (
    'part',
    'vendor',
    'product',
    'version',
    'update',
    'edition',
    'language',
    'sw_edition',
    'target_sw',
    'target_hw',
    'other',
)


@dataclass
class Cpe:
    """Structured CPE name.

    Fields are positional, in the order of CPE_FIELDS. An empty
    string means the attribute was absent from the source string,
    which is different from the explicit `*` wildcard.
    """
    part: str = ''
    vendor: str = ''
    product: str = ''
    version: str = ''
    update: str = ''
    edition: str = ''
    language: str = ''
    sw_edition: str = ''
    target_sw: str = ''
    target_hw: str = ''
    other: str = ''

    def fields(self) -> List[str]:
        return list(astuple(self))

    @staticmethod
    def from_fields(values: Iterable[str]) -> 'Cpe':
        res = Cpe()
        for name, value in zip(CPE_FIELDS, values):
            setattr(res, name, value)
        return res
