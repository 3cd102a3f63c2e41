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

import xml.etree.ElementTree as ElementTree
from typing import IO, Iterable, Optional


_CPE_DICT_NS = '{http://cpe.mitre.org/dictionary/2.0}'
_CPE_EXT_NS = '{http://scap.nist.gov/schema/cpe-extension/2.3}'


def _extract_cpe23(elem: ElementTree.Element) -> str:
    deprecations = elem.findall(_CPE_EXT_NS + 'deprecation')

    if len(deprecations) == 0:
        return elem.attrib['name']

    if len(deprecations) > 1:
        raise RuntimeError(f'Unexpected number of CPE deprecations: {len(deprecations)}')

    deprecated_bys = deprecations[0].findall(_CPE_EXT_NS + 'deprecated-by')

    if len(deprecated_bys) != 1:
        raise RuntimeError(f'Unexpected number of CPE deprecated-bys: {len(deprecated_bys)}')

    if list(deprecated_bys[0]):
        raise RuntimeError('Unexpected child elements of CPE deprecated-by for ' + elem.attrib['name'])

    return deprecated_bys[0].attrib['name']


def _extract_name(item: ElementTree.Element, uri_names: bool) -> Optional[str]:
    if item.tag != _CPE_DICT_NS + 'cpe-item' or item.attrib.get('deprecated') == 'true':
        return None

    if uri_names:
        return item.attrib['name']

    if (cpe23_item := item.find(_CPE_EXT_NS + 'cpe23-item')) is not None:
        return _extract_cpe23(cpe23_item)

    return None


def iter_cpe_dict(source: IO[bytes], uri_names: bool = False) -> Iterable[str]:
    """Iterate over names of non-deprecated items of NVD CPE dictionary.

    By default, formatted binding names from cpe23-item elements are
    produced; with uri_names, the legacy URI binding names of
    cpe-item elements are produced instead.
    """
    nestlevel = 0
    rootelem = None
    for event, elem in ElementTree.iterparse(source, events=['start', 'end']):
        if event == 'start':
            if rootelem is None:
                rootelem = elem
            nestlevel += 1
            continue

        nestlevel -= 1
        if nestlevel != 1:
            continue

        if (name := _extract_name(elem, uri_names)) is not None:
            yield name

        # items are processed one by one; drop the ones already seen
        rootelem.clear()
