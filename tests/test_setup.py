"""Tests for fmtlog.setup module."""
import importlib
import sys
from unittest.mock import MagicMock, patch

import pytest

import fmtlog
from fmtlog import formats
from fmtlog.config import Config
from fmtlog.dispatcher import Dispatcher
from fmtlog.errors import CompileError, ConfigError
from fmtlog.level import Level
from fmtlog.setup import configure_logging

#
# Windows colorama initialization tests
#


class TestWindowsColoramaInit:
    """Test colorama initialization on Windows platform."""

    def setup_method(self):
        import fmtlog.sinks
        self._saved = dict(vars(fmtlog.sinks))

    def teardown_method(self):
        """Put back the classes other modules already imported."""
        import fmtlog.sinks
        if 'colorama' not in self._saved:
            vars(fmtlog.sinks).pop('colorama', None)
        vars(fmtlog.sinks).update(self._saved)

    def test_colorama_initialized_on_windows(self):
        """Test that colorama.just_fix_windows_console is called on Windows."""
        mock_colorama = MagicMock()

        with patch.dict(sys.modules, {'colorama': mock_colorama}):
            with patch.object(sys, 'platform', 'win32'):
                import fmtlog.sinks
                importlib.reload(fmtlog.sinks)

        mock_colorama.just_fix_windows_console.assert_called_once()

    def test_colorama_not_initialized_on_linux(self):
        """Test that colorama is not initialized on Linux."""
        mock_colorama = MagicMock()

        with patch.dict(sys.modules, {'colorama': mock_colorama}):
            with patch.object(sys, 'platform', 'linux'):
                import fmtlog.sinks
                importlib.reload(fmtlog.sinks)

        mock_colorama.just_fix_windows_console.assert_not_called()


#
# configure_logging tests
#


@patch('fmtlog.setup.intercept_stdlib')
@patch('fmtlog.setup.install')
class TestConfigureLogging:

    def test_defaults(self, mock_install, mock_intercept):
        """Test default configuration installs a dispatcher."""
        dispatcher = configure_logging(environ={})
        assert isinstance(dispatcher, Dispatcher)
        assert dispatcher.level is Level.Info
        mock_install.assert_called_once_with(dispatcher)
        mock_intercept.assert_called_once_with(None)

    def test_config_object(self, mock_install, mock_intercept):
        """Test an explicit Config is used."""
        dispatcher = configure_logging(Config(level='debug'), environ={})
        assert dispatcher.level is Level.Debug

    def test_config_dict(self, mock_install, mock_intercept):
        """Test a mapping is loaded like a config file."""
        dispatcher = configure_logging({'level': 'error', 'format': 'simple2'}, environ={})
        assert dispatcher.level is Level.Error
        assert dispatcher.template.source == formats.SIMPLE2

    def test_config_file(self, mock_install, mock_intercept, tmp_path):
        """Test a path loads the configuration file."""
        path = tmp_path / 'log.toml'
        path.write_text('level = "warn"\nmodules = ["app"]\n')
        dispatcher = configure_logging(path=path, environ={})
        assert dispatcher.level is Level.Warn
        assert 'app' in dispatcher.modules

    def test_environment_wins(self, mock_install, mock_intercept):
        """Test FMTLOG_* variables override the given config."""
        dispatcher = configure_logging({'level': 'error'}, environ={'FMTLOG_LEVEL': 'trace'})
        assert dispatcher.level is Level.Trace

    def test_intercept_named(self, mock_install, mock_intercept):
        """Test a list intercepts those stdlib loggers."""
        configure_logging(intercept=['web', 'db'], environ={})
        mock_intercept.assert_called_once_with(['web', 'db'])

    def test_intercept_disabled(self, mock_install, mock_intercept):
        """Test intercept=False leaves stdlib logging alone."""
        configure_logging(intercept=False, environ={})
        mock_intercept.assert_not_called()

    def test_bad_format_not_installed(self, mock_install, mock_intercept):
        """Test a malformed format raises before anything is installed."""
        with pytest.raises(CompileError):
            configure_logging({'format': '%F(red){unterminated'}, environ={})
        mock_install.assert_not_called()

    def test_bad_config(self, mock_install, mock_intercept):
        """Test malformed configuration raises ConfigError."""
        with pytest.raises(ConfigError):
            configure_logging({'level': 'loud'}, environ={})
        mock_install.assert_not_called()


class TestConstructors:

    def test_new(self):
        """Test new() builds from custom settings."""
        dispatcher = fmtlog.new(Config(level='trace'))
        assert dispatcher.level is Level.Trace

    def test_default(self):
        """Test default() uses default settings."""
        dispatcher = fmtlog.default()
        assert dispatcher.level is Level.Info
        assert dispatcher.template.source == formats.SIMPLE1

    def test_from_json(self):
        dispatcher = fmtlog.from_json('{"level": "debug"}')
        assert dispatcher.level is Level.Debug

    def test_from_yaml(self):
        dispatcher = fmtlog.from_yaml('level: warn\n')
        assert dispatcher.level is Level.Warn

    def test_from_toml(self):
        dispatcher = fmtlog.from_toml('level = "off"\n')
        assert dispatcher.level is Level.Off


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
