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

from typing import Any, ClassVar, IO, Iterable

from jsonslicer import JsonSlicer

from cpeparser.source import Source


def iter_node_cpes(node: Any) -> Iterable[str]:
    for match in node.get('cpe_match', []):
        if 'cpe23Uri' in match:
            yield match['cpe23Uri']

    for child in node.get('children', []):
        yield from iter_node_cpes(child)


class CveFeedSource(Source):
    TYPE: ClassVar[str] = 'cve_feed'

    def get_type(self) -> str:
        return CveFeedSource.TYPE

    def _process(self, stream: IO[bytes]) -> Iterable[str]:
        for cve in JsonSlicer(stream, ('CVE_Items', None)):
            for node in cve.get('configurations', {}).get('nodes', []):
                yield from iter_node_cpes(node)
