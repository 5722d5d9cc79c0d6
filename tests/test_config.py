"""
Unit tests for moduletypes.config module
"""
import unittest
import tempfile
import logging
import os
import shutil
import json
from pathlib import Path
from unittest.mock import patch

from moduletypes.config import (
    load_config,
    save_config,
    get_config_path,
    get_default_config,
    generate_config_example,
    configure_logging,
    merge_configs,
    apply_env_overrides,
)
from moduletypes.exit_codes import ConfigError, CONFIG_ERROR


class TestConfigManagement(unittest.TestCase):
    """Test configuration management functionality"""

    def setUp(self):
        """Set up test environment"""
        self.temp_dir = tempfile.mkdtemp()
        env = {k: v for k, v in os.environ.items() if not k.startswith('MODULETYPES_')}
        env['HOME'] = self.temp_dir
        self.env_patch = patch.dict(os.environ, env, clear=True)
        self.env_patch.start()
        self.config_dir = Path(self.temp_dir) / '.moduletypes'

    def tearDown(self):
        """Clean up test environment"""
        self.env_patch.stop()
        shutil.rmtree(self.temp_dir)

    def test_get_default_config(self):
        """Test default configuration structure"""
        config = get_default_config()

        self.assertEqual(config['classifier']['android_facet_name'], 'Android')
        self.assertEqual(config['classifier']['gradle_system_id'], 'GRADLE')
        self.assertEqual(config['classifier']['kobalt_system_id'], 'KOBALT')
        self.assertIn('level', config['logging'])
        self.assertIn('format', config['logging'])
        self.assertFalse(config['output']['pretty'])

    def test_config_path_default(self):
        self.assertEqual(get_config_path(), self.config_dir / 'config.json')

    def test_config_path_env(self):
        path = Path(self.temp_dir) / 'custom.yaml'
        path.write_text('output:\n  pretty: true\n')
        os.environ['MODULETYPES_CONFIG'] = str(path)
        self.assertEqual(get_config_path(), path)
        self.assertTrue(load_config()['output']['pretty'])

    def test_load_config_no_file(self):
        """Test loading config when no file exists"""
        self.assertEqual(load_config(), get_default_config())

    def test_load_config_json_file(self):
        """Test loading config from JSON file"""
        self.config_dir.mkdir()
        (self.config_dir / 'config.json').write_text(json.dumps({
            'classifier': {'android_facet_name': 'Droid'},
            'logging': {'level': 'DEBUG'}
        }))

        config = load_config()
        self.assertEqual(config['classifier']['android_facet_name'], 'Droid')
        self.assertEqual(config['classifier']['gradle_system_id'], 'GRADLE')
        self.assertEqual(config['logging']['level'], 'DEBUG')

    def test_load_config_toml_file(self):
        self.config_dir.mkdir()
        (self.config_dir / 'config.toml').write_text('[classifier]\nkobalt_system_id = "KOBALT2"\n')
        self.assertEqual(load_config()['classifier']['kobalt_system_id'], 'KOBALT2')

    def test_load_config_invalid_file(self):
        self.config_dir.mkdir()
        (self.config_dir / 'config.json').write_text('{"classifier": ')
        with self.assertRaises(ConfigError) as ctx:
            load_config()
        self.assertEqual(ctx.exception.exit_code, CONFIG_ERROR)

    def test_env_overrides(self):
        os.environ['MODULETYPES_CLASSIFIER_ANDROID_FACET_NAME'] = 'AndroidX'
        os.environ['MODULETYPES_OUTPUT_PRETTY'] = 'true'
        config = load_config()
        self.assertEqual(config['classifier']['android_facet_name'], 'AndroidX')
        self.assertTrue(config['output']['pretty'])

    def test_save_config(self):
        config = get_default_config()
        config['classifier']['android_facet_name'] = 'Droid'
        path = save_config(config)

        self.assertEqual(path, self.config_dir / 'config.json')
        self.assertEqual(load_config()['classifier']['android_facet_name'], 'Droid')

    def test_generate_config_example(self):
        path = generate_config_example()
        self.assertTrue(path.exists())
        self.assertEqual(json.loads(path.read_text()), get_default_config())


class TestConfigHelpers(unittest.TestCase):

    def test_merge_configs_nested(self):
        base = {'a': {'x': 1, 'y': 2}, 'b': 1}
        merged = merge_configs(base, {'a': {'y': 3}, 'c': 4})
        self.assertEqual(merged, {'a': {'x': 1, 'y': 3}, 'b': 1, 'c': 4})
        self.assertEqual(base['a']['y'], 2)

    def test_apply_env_overrides_types(self):
        config = {'output': {'pretty': False}, 'limits': {'max_modules': 1}}
        env = {
            'MODULETYPES_OUTPUT_PRETTY': 'yes',
            'MODULETYPES_LIMITS_MAX_MODULES': '25',
            'MODULETYPES_UNKNOWN_KEY': 'ignored',
        }
        with patch.dict(os.environ, env):
            config = apply_env_overrides(config)
        self.assertIs(config['output']['pretty'], True)
        self.assertEqual(config['limits']['max_modules'], 25)
        self.assertNotIn('unknown', config)

    def test_apply_env_overrides_keeps_strings(self):
        config = {'classifier': {'android_facet_name': 'Android', 'gradle_system_id': 'GRADLE'}}
        env = {
            'MODULETYPES_CLASSIFIER_ANDROID_FACET_NAME': 'on',
            'MODULETYPES_CLASSIFIER_GRADLE_SYSTEM_ID': '0',
        }
        with patch.dict(os.environ, env):
            config = apply_env_overrides(config)
        self.assertEqual(config['classifier']['android_facet_name'], 'on')
        self.assertEqual(config['classifier']['gradle_system_id'], '0')

    def test_configure_logging(self):
        logger = configure_logging({'logging': {'level': 'warning'}})
        self.assertEqual(logger.level, logging.WARNING)

        logger = configure_logging({'logging': {'level': 'warning'}}, verbose=True)
        self.assertEqual(logger.level, logging.DEBUG)

        logger = configure_logging({'logging': {'level': 'bogus'}})
        self.assertEqual(logger.level, logging.INFO)


if __name__ == '__main__':
    unittest.main()
