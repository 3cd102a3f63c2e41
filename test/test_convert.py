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
import contextlib
import importlib.util
import io
import json
import os
import tempfile
import unittest
from typing import Any
from unittest import mock


def _load_script() -> Any:
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'cpe-convert.py')
    spec = importlib.util.spec_from_file_location('cpe_convert', path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)  # type: ignore
    return module


cpe_convert = _load_script()


def _options(**kwargs: Any) -> argparse.Namespace:
    options = argparse.Namespace(
        prefix='formatted',
        fields=False,
        unique=False,
        part=None,
        cpe_dict=[],
        cve_feed=[],
        uri_names=False,
        timeout=60,
        cpes=[],
    )
    for key, value in kwargs.items():
        setattr(options, key, value)
    return options


def _run(options: argparse.Namespace) -> str:
    output = io.StringIO()
    with contextlib.redirect_stdout(output):
        cpe_convert.Converter(options).run()
    return output.getvalue()


class TestConverter(unittest.TestCase):
    def test_formatted(self):
        self.assertEqual(
            _run(_options(cpes=['cpe:/a:search_autocomplete_project:search_autocomplete:7.x-3.0:rc3:~~~drupal~~'])),
            'cpe:2.3:a:search_autocomplete_project:search_autocomplete:7.x-3.0:rc3:*:*:*:drupal:*:*\n'
        )

    def test_no_prefix(self):
        self.assertEqual(
            _run(_options(prefix='none', cpes=['cpe:/h:netgear:rp114:-'])),
            'h:netgear:rp114:-:::::::\n'
        )

    def test_fields(self):
        output = _run(_options(fields=True, cpes=['cpe:/h:netgear:rp114:-']))

        self.assertTrue(output.startswith('part=h\tvendor=netgear\tproduct=rp114\tversion=-\tupdate=\t'))
        self.assertTrue(output.endswith('other=\n'))

    def test_part_and_unique(self):
        self.assertEqual(
            _run(_options(
                prefix='uri',
                part='a',
                unique=True,
                cpes=[
                    'cpe:2.3:a:foo:bar:1.0:*:*:*:*:*:*:*',
                    'cpe:2.3:o:foo:baz:1.0:*:*:*:*:*:*:*',
                    'cpe:/a:foo:bar:1.0:*:*:*:*:*:*:*',
                ]
            )),
            'cpe:/a:foo:bar:1.0:*:*:*:*:*:*:*\n'
        )



CPE_DICT = b'''<?xml version="1.0" encoding="UTF-8"?>
<cpe-list xmlns="http://cpe.mitre.org/dictionary/2.0" xmlns:cpe-23="http://scap.nist.gov/schema/cpe-extension/2.3">
  <cpe-item name="cpe:/a:search_autocomplete_project:search_autocomplete:7.x-3.0:rc3:~~~drupal~~">
    <cpe-23:cpe23-item name="cpe:2.3:a:search_autocomplete_project:search_autocomplete:7.x-3.0:rc3:*:*:*:drupal:*:*"/>
  </cpe-item>
  <cpe-item name="cpe:/h:netgear:rp114:-">
    <cpe-23:cpe23-item name="cpe:2.3:h:netgear:rp114:-:*:*:*:*:*:*:*"/>
  </cpe-item>
</cpe-list>
'''


class TestConverterInputs(unittest.TestCase):
    def _write_dict(self) -> str:
        directory = tempfile.TemporaryDirectory()
        self.addCleanup(directory.cleanup)
        path = os.path.join(directory.name, 'official-cpe-dictionary_v2.3.xml')
        with open(path, 'wb') as f:
            f.write(CPE_DICT)
        return path

    def test_stdin(self):
        stdin = io.StringIO('cpe:/h:netgear:rp114:-\n\n  \ncpe:/a:v:p:1:~x~y:extra\n')

        with mock.patch('sys.stdin', stdin):
            output = _run(_options(prefix='uri'))

        self.assertEqual(output, 'cpe:/h:netgear:rp114:-:::::::\ncpe:/a:v:p:1:~x~y:*:x:y:::\n')

    def test_cpe_dict(self):
        output = _run(_options(prefix='uri', cpe_dict=[self._write_dict()]))

        self.assertEqual(
            output,
            'cpe:/a:search_autocomplete_project:search_autocomplete:7.x-3.0:rc3:*:*:*:drupal:*:*\n'
            'cpe:/h:netgear:rp114:-:*:*:*:*:*:*:*\n'
        )

    def test_cpe_dict_uri_names(self):
        output = _run(_options(prefix='uri', cpe_dict=[self._write_dict()], uri_names=True))

        self.assertEqual(
            output,
            'cpe:/a:search_autocomplete_project:search_autocomplete:7.x-3.0:rc3:*:*:*:drupal:*:*\n'
            'cpe:/h:netgear:rp114:-:::::::\n'
        )

    def test_cve_feed(self):
        directory = tempfile.TemporaryDirectory()
        self.addCleanup(directory.cleanup)
        path = os.path.join(directory.name, 'nvdcve-1.1-2020.json')
        with open(path, 'w') as f:
            json.dump({'CVE_Items': [{'configurations': {'nodes': [{'operator': 'OR', 'cpe_match': [{'vulnerable': True, 'cpe23Uri': 'cpe:2.3:h:netgear:rp114:-:*:*:*:*:*:*:*'}]}]}}]}, f)

        output = _run(_options(fields=True, cve_feed=[path]))

        self.assertTrue(output.startswith('part=h\tvendor=netgear\tproduct=rp114\tversion=-\tupdate=*\t'))

    def test_positional_take_precedence(self):
        output = _run(_options(prefix='none', cpes=['cpe:/h:netgear:rp114:-'], cpe_dict=[self._write_dict()]))

        self.assertEqual(output, 'h:netgear:rp114:-:::::::\n')


if __name__ == '__main__':
    unittest.main()
