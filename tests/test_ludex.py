#!/usr/bin/env python3
"""
Tests for configuration loading and the ludex command line.

Run with:
    python -m pytest tests/
  or
    python -m unittest discover tests/
"""
import io
import json
import logging
import os
import shutil
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import ludex
from catalog import generate_id
from catalog.config import ConfigError, load_config


class TmpDirMixin(unittest.TestCase):
    """Creates a fresh temp directory for each test."""

    def setUp(self):
        self.tmp = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmp, ignore_errors=True)

    def _path(self, name: str) -> str:
        return os.path.join(self.tmp, name)


# ===========================================================================
# Config
# ===========================================================================

class TestLoadConfig(TmpDirMixin):

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_file_gives_defaults(self):
        cfg = load_config(self._path('config.json'))
        self.assertEqual(cfg['categories_path'], 'categories.json')
        self.assertEqual(cfg['log_level'], 'WARNING')

    @patch.dict(os.environ, {}, clear=True)
    def test_file_values_used(self):
        path = self._path('config.json')
        with open(path, 'w') as f:
            json.dump({'categories_path': 'cats.json', 'log_level': 'DEBUG'}, f)
        cfg = load_config(path)
        self.assertEqual(cfg['categories_path'], 'cats.json')
        self.assertEqual(cfg['log_level'], 'DEBUG')

    @patch.dict(os.environ, {'LUDEX_CATEGORIES_PATH': 'env.json',
                             'LUDEX_LOG_LEVEL': 'ERROR'}, clear=True)
    def test_env_overrides_file(self):
        path = self._path('config.json')
        with open(path, 'w') as f:
            json.dump({'categories_path': 'cats.json'}, f)
        cfg = load_config(path)
        self.assertEqual(cfg['categories_path'], 'env.json')
        self.assertEqual(cfg['log_level'], 'ERROR')

    def test_corrupt_file_raises(self):
        path = self._path('config.json')
        with open(path, 'w') as f:
            f.write('{not json')
        with self.assertRaises(ConfigError):
            load_config(path)

    def test_non_object_raises(self):
        path = self._path('config.json')
        with open(path, 'w') as f:
            json.dump(['a'], f)
        with self.assertRaises(ConfigError):
            load_config(path)

    @patch.dict(os.environ, {}, clear=True)
    def test_numeric_log_level_accepted(self):
        path = self._path('config.json')
        with open(path, 'w') as f:
            json.dump({'log_level': 10}, f)
        self.assertEqual(load_config(path)['log_level'], 10)

    @patch.dict(os.environ, {}, clear=True)
    def test_wrong_value_types_raise(self):
        path = self._path('config.json')
        for bad in ({'log_level': ['DEBUG']}, {'log_level': True},
                    {'categories_path': 5}, {'categories_path': ''}):
            with open(path, 'w') as f:
                json.dump(bad, f)
            with self.assertRaises(ConfigError, msg=repr(bad)):
                load_config(path)


class TestSetupLogging(unittest.TestCase):

    def tearDown(self):
        logging.getLogger('ludex').setLevel(logging.WARNING)

    def test_level_names_and_numbers(self):
        self.assertEqual(ludex.setup_logging('DEBUG').level, logging.DEBUG)
        self.assertEqual(ludex.setup_logging('info').level, logging.INFO)
        self.assertEqual(ludex.setup_logging(40).level, logging.ERROR)
        self.assertEqual(ludex.setup_logging('30').level, logging.WARNING)

    def test_unknown_name_falls_back_to_warning(self):
        self.assertEqual(ludex.setup_logging('LOUD').level, logging.WARNING)

    def test_single_handler(self):
        ludex.setup_logging('INFO')
        ludex.setup_logging('ERROR')
        self.assertEqual(len(logging.getLogger('ludex').handlers), 1)


# ===========================================================================
# Command line
# ===========================================================================

@patch.dict(os.environ, {}, clear=True)
class TestCommandLine(TmpDirMixin):

    def _run(self, *argv):
        out = io.StringIO()
        data = self._path('categories.json')
        cfg = self._path('config.json')
        with redirect_stdout(out):
            code = ludex.main(['-c', cfg, '-d', data] + list(argv))
        return code, out.getvalue()

    def _data(self):
        with open(self._path('categories.json'), encoding='utf-8') as f:
            return json.load(f)

    def test_add_and_list(self):
        code, out = self._run('add', 'RPG')
        self.assertEqual(code, 0)
        self.assertIn(generate_id('RPG'), out)
        code, out = self._run('list')
        self.assertEqual(code, 0)
        self.assertIn('RPG', out)

    def test_list_empty(self):
        code, out = self._run('list')
        self.assertEqual(code, 0)
        self.assertIn('No categories', out)

    def test_games_and_ordering(self):
        cid = generate_id('RPG')
        self._run('add', 'RPG')
        self._run('add-game', cid, 'g1')
        self._run('add-game', cid, 'g2')
        code, _ = self._run('game-up', cid, 'g2')
        self.assertEqual(code, 0)
        self.assertEqual(self._data()[0]['games'], ['g2', 'g1'])
        code, _ = self._run('game-up', cid, 'g2')
        self.assertEqual(code, 1)

    def test_duplicate_add_game_exits_nonzero(self):
        cid = generate_id('RPG')
        self._run('add', 'RPG')
        self._run('add-game', cid, 'g1')
        code, _ = self._run('add-game', cid, 'g1')
        self.assertEqual(code, 1)
        self.assertEqual(self._data()[0]['games'], ['g1'])

    def test_unknown_category_exits_nonzero(self):
        self._run('add', 'RPG')
        code, out = self._run('rename', '999999999', 'x')
        self.assertEqual(code, 1)
        self.assertIn('not found', out)

    def test_reorder_and_delete(self):
        a, b = generate_id('A'), generate_id('B')
        self._run('add', 'A')
        self._run('add', 'B')
        self.assertEqual(self._run('up', b)[0], 0)
        self.assertEqual([c['name'] for c in self._data()], ['B', 'A'])
        self.assertEqual(self._run('down', a)[0], 1)
        self.assertEqual(self._run('delete', a)[0], 0)
        self.assertEqual([c['name'] for c in self._data()], ['B'])

    def test_purge_and_which(self):
        a, b = generate_id('A'), generate_id('B')
        self._run('add', 'A')
        self._run('add', 'B')
        self._run('add-game', a, 'g1')
        self._run('add-game', b, 'g1')
        _, out = self._run('which', 'g1')
        self.assertIn('A', out)
        self.assertIn('B', out)
        code, out = self._run('purge-game', 'g1')
        self.assertEqual(code, 0)
        self.assertIn('2 categories', out)
        self.assertTrue(all('g1' not in c['games'] for c in self._data()))

    def test_gen_id(self):
        code, out = self._run('gen-id', 'RPG')
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), '175310842')

    def test_write_failure_exits_nonzero(self):
        out = io.StringIO()
        with redirect_stdout(out):
            code = ludex.main(['-c', self._path('config.json'),
                               '-d', self._path('missing/categories.json'),
                               'add', 'RPG'])
        self.assertEqual(code, 1)
        self.assertIn('could not update', out.getvalue())

    def test_bad_config_exits_nonzero(self):
        with open(self._path('config.json'), 'w') as f:
            f.write('nope')
        code, _ = self._run('list')
        self.assertEqual(code, 1)

    def test_numeric_log_level_in_config(self):
        with open(self._path('config.json'), 'w') as f:
            json.dump({'log_level': 10}, f)
        code, out = self._run('list')
        self.assertEqual(code, 0)
        self.assertIn('No categories', out)
        logging.getLogger('ludex').setLevel(logging.WARNING)

    def test_wrong_type_in_config_exits_nonzero(self):
        with open(self._path('config.json'), 'w') as f:
            json.dump({'log_level': {'level': 'DEBUG'}}, f)
        code, out = self._run('list')
        self.assertEqual(code, 1)
        self.assertIn('log_level', out)


if __name__ == '__main__':
    unittest.main()
