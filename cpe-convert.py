#!/usr/bin/env python3
#
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

import argparse
import logging
import sys
from typing import Iterable, MutableSet, Optional

from cpeparser.cpe import CPE_FIELDS, Cpe
from cpeparser.parser import parse, stringify
from cpeparser.source import Source
from cpeparser.sources.cpedict import CpeDictSource
from cpeparser.sources.cvefeed import CveFeedSource


class Converter:
    _options: argparse.Namespace

    def __init__(self, options: argparse.Namespace) -> None:
        self._options = options

    def _generate_sources(self) -> Iterable[Source]:
        for location in self._options.cpe_dict:
            yield CpeDictSource(location, self._options.timeout, uri_names=self._options.uri_names)

        for location in self._options.cve_feed:
            yield CveFeedSource(location, self._options.timeout)

    def _iter_inputs(self) -> Iterable[str]:
        if self._options.cpes:
            yield from self._options.cpes
            return

        sources = list(self._generate_sources())
        if sources:
            for source in sources:
                yield from source.iter_cpes()
            return

        for line in sys.stdin:
            if line.strip():
                yield line

    def _format(self, cpe: Cpe) -> str:
        if self._options.fields:
            return '\t'.join(f'{name}={value}' for name, value in zip(CPE_FIELDS, cpe.fields()))

        prefix = None if self._options.prefix == 'none' else self._options.prefix
        return stringify(cpe, prefix=prefix)

    def run(self) -> None:
        seen: Optional[MutableSet[str]] = set() if self._options.unique else None
        num_converted = 0

        for cpe_str in self._iter_inputs():
            cpe = parse(cpe_str)

            if self._options.part is not None and cpe.part != self._options.part:
                continue

            output = self._format(cpe)
            logging.debug(f'{cpe_str.strip()} -> {output}')

            if seen is not None:
                if output in seen:
                    continue
                seen.add(output)

            print(output)
            num_converted += 1

        logging.info(f'{num_converted} cpe(s) converted')


def main() -> None:
    config = {
        'PREFIX': 'formatted',
        'TIMEOUT': 60,
    }

    parser = argparse.ArgumentParser(formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument('-d', '--debug', action='store_true', help='enable debug logging')
    parser.add_argument('-p', '--prefix', choices=['formatted', 'uri', 'none'], default=config['PREFIX'], help='binding prefix for produced cpes')
    parser.add_argument('-F', '--fields', action='store_true', help='print parsed fields instead of cpe strings')
    parser.add_argument('-u', '--unique', action='store_true', help='suppress duplicate output lines')
    parser.add_argument('--part', choices=['a', 'o', 'h'], help='only output cpes of given part')
    parser.add_argument('--cpe-dict', metavar='LOCATION', action='append', default=[], help='read cpes from NVD CPE dictionary (url or path)')
    parser.add_argument('--cve-feed', metavar='LOCATION', action='append', default=[], help='read cpes from NVD CVE JSON feed (url or path)')
    parser.add_argument('--uri-names', action='store_true', help='read URI binding names from CPE dictionary')
    parser.add_argument('-t', '--timeout', type=float, default=config['TIMEOUT'], help='HTTP timeout for feeds, in seconds')
    parser.add_argument('cpes', metavar='CPE', nargs='*', help='cpe strings to convert (read from stdin if none given)')

    args = parser.parse_args()

    logging.basicConfig(format='%(asctime)s %(levelname)-8s %(message)s', level=logging.DEBUG if args.debug else logging.INFO)

    Converter(args).run()


if __name__ == '__main__':
    main()
