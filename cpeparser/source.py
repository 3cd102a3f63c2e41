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

import gzip
import logging
from abc import ABC, abstractmethod
from contextlib import ExitStack
from typing import IO, Iterable, Iterator

import requests


_USER_AGENT = 'repology-cpeparser/0 (+{}/docs/bots)'.format('https://repology.org')


class Source(ABC):
    _location: str
    _timeout: float

    _num_cpes: int = 0

    def __init__(self, location: str, timeout: float = 60) -> None:
        self._location = location
        self._timeout = timeout

    def _is_remote(self) -> bool:
        return self._location.startswith(('http://', 'https://'))

    @abstractmethod
    def _process(self, stream: IO[bytes]) -> Iterable[str]:
        pass

    @abstractmethod
    def get_type(self) -> str:
        pass

    def get_num_cpes(self) -> int:
        return self._num_cpes

    def iter_cpes(self) -> Iterator[str]:
        logging.info(f'{self.get_type()} source {self._location}: start reading')

        self._num_cpes = 0

        with ExitStack() as stack:
            if self._is_remote():
                response = stack.enter_context(
                    requests.get(self._location, stream=True, headers={'user-agent': _USER_AGENT}, timeout=self._timeout)
                )

                if response.status_code != 200:
                    logging.error(f'{self.get_type()} source {self._location}: got bad HTTP code {response.status_code}')
                    return

                stream: IO[bytes] = response.raw
            else:
                stream = stack.enter_context(open(self._location, 'rb'))

            if self._location.endswith('.gz'):
                stream = stack.enter_context(gzip.open(stream))

            logging.info(f'{self.get_type()} source {self._location}: processing')

            for cpe in self._process(stream):
                self._num_cpes += 1
                yield cpe

        logging.info(f'{self.get_type()} source {self._location}: done ({self._num_cpes} cpes)')
