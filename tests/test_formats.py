import pytest

from fmtlog import formats
from fmtlog.event import LogEvent
from fmtlog.level import Level
from fmtlog.render import render_bytes
from fmtlog.template import compile

PRESETS = [name for name in formats.__all__ if name != 'get']


class TestPresets:

    @pytest.mark.parametrize('name', PRESETS)
    def test_compiles(self, name):
        """Test every preset is a valid template."""
        assert compile(getattr(formats, name)).source == getattr(formats, name)

    @pytest.mark.parametrize('name', PRESETS)
    def test_renders_plain(self, name):
        """Test every preset renders without escapes when uncolored."""
        event = LogEvent(Level.Warn, 'boom', target='app', file='app.py', line=1)
        data = render_bytes(compile(getattr(formats, name)), event)
        assert b'\x1b' not in data
        assert b'boom' in data

    def test_simple1(self):
        """Test the default preset output."""
        event = LogEvent(Level.Error, 'boom')
        assert render_bytes(compile(formats.SIMPLE1), event) == b'ERROR: boom\n'

    def test_simple2_lower(self):
        event = LogEvent(Level.Debug, 'boom')
        assert render_bytes(compile(formats.SIMPLE2_LOWER), event) == b'[debug] boom\n'

    def test_debug1(self):
        event = LogEvent(Level.Info, 'boom', target='app', file='app.py', line=7)
        assert render_bytes(compile(formats.DEBUG1), event) == b'[app (app.py:7)] INFO: boom\n'

    def test_simple1_colored(self):
        """Test the level is bold and colored per level."""
        event = LogEvent(Level.Error, 'boom')
        data = render_bytes(compile(formats.SIMPLE1), event, colorize=True)
        assert data.startswith(b'\x1b[31m\x1b[1;31mERROR')


class TestGet:

    @pytest.mark.parametrize('name', ['simple2', 'SIMPLE2', 'Simple2'])
    def test_case_insensitive(self, name):
        """Test preset lookup ignores case."""
        assert formats.get(name) == formats.SIMPLE2

    def test_unknown(self):
        """Test unknown names give None."""
        assert formats.get('fancy') is None

    def test_get_is_not_a_preset(self):
        """Test the lookup function is not returned as a preset."""
        assert formats.get('get') is None


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
