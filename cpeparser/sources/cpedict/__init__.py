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

from typing import ClassVar, IO, Iterable

from cpeparser.source import Source
from cpeparser.sources.cpedict.parsing import iter_cpe_dict


class CpeDictSource(Source):
    TYPE: ClassVar[str] = 'cpe_dict'

    _uri_names: bool

    def __init__(self, location: str, timeout: float = 60, uri_names: bool = False) -> None:
        super().__init__(location, timeout)
        self._uri_names = uri_names

    def get_type(self) -> str:
        return CpeDictSource.TYPE

    def _process(self, stream: IO[bytes]) -> Iterable[str]:
        return iter_cpe_dict(stream, uri_names=self._uri_names)
