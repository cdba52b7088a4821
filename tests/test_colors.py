import pytest

from fmtlog.colors import ANSI_RESET, COLOR_NAMES, Color, Style, StyleContext
from fmtlog.errors import CompileError

#
# Color parsing tests
#


class TestColorParse:

    def test_hex_parses_as_rgb(self):
        """Test #RRGGBB parses into an RGB triple."""
        assert Color.parse('#ff8000') == Color(rgb=(255, 128, 0))

    def test_hex_is_case_insensitive(self):
        """Test hex digits may be upper case."""
        assert Color.parse('#FF0000') == Color.parse('#ff0000')

    @pytest.mark.parametrize('text', ['#ff00', '#ff00000', '#gg0000', '#'])
    def test_bad_hex_rejected(self, text):
        """Test hex must be exactly six hex digits."""
        with pytest.raises(CompileError):
            Color.parse(text)

    def test_base_names(self):
        """Test the eight base names parse."""
        for name in ('black', 'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white'):
            assert Color.parse(name).name == name

    def test_bright_names(self):
        """Test bright variants parse."""
        assert Color.parse('bright black').name == 'bright black'
        assert Color.parse('bright red').name == 'bright red'

    def test_purple_is_magenta(self):
        """Test purple is an alias for magenta."""
        assert Color.parse('purple') == Color.parse('magenta')
        assert Color.parse('bright purple') == Color.parse('bright magenta')

    def test_names_are_case_sensitive(self):
        """Test names must match the table exactly."""
        with pytest.raises(CompileError):
            Color.parse('Red')

    def test_unknown_name_rejected(self):
        """Test an unknown name raises CompileError."""
        with pytest.raises(CompileError, match='invalid color'):
            Color.parse('orange')

    def test_color_names_table(self):
        """Test the name table holds base, alias and bright names."""
        assert len(COLOR_NAMES) == 18


#
# SGR parameter tests
#


class TestColorParams:

    def test_named_foreground(self):
        """Test named foreground codes are 30-37."""
        assert Color.parse('red').fg_param() == '31'
        assert Color.parse('white').fg_param() == '37'

    def test_bright_foreground(self):
        """Test bright foreground codes are 90-97."""
        assert Color.parse('bright black').fg_param() == '90'

    def test_named_background(self):
        """Test named background codes are 40-47."""
        assert Color.parse('blue').bg_param() == '44'

    def test_bright_background(self):
        """Test bright background codes are 100-107."""
        assert Color.parse('bright green').bg_param() == '102'

    def test_rgb(self):
        """Test RGB uses the 24-bit forms."""
        color = Color.parse('#ff0000')
        assert color.fg_param() == '38;2;255;0;0'
        assert color.bg_param() == '48;2;255;0;0'


#
# StyleContext tests
#


class TestStyleContext:

    def test_default_is_neutral(self):
        """Test unset colors and no flags is neutral."""
        ctx = StyleContext()
        assert ctx.neutral
        assert ctx.sgr() == ''

    def test_sgr_combines_flags_and_colors(self):
        """Test one sequence carries flags, then fg, then bg."""
        ctx = StyleContext(fg=Color.parse('red'), bg=Color.parse('white'),
                           flags=Style.BOLD | Style.UNDERLINE)
        assert ctx.sgr() == '\x1b[1;4;31;47m'

    @pytest.mark.parametrize(('style', 'code'), [
        (Style.BOLD, '1'),
        (Style.DIM, '2'),
        (Style.ITALIC, '3'),
        (Style.UNDERLINE, '4'),
        (Style.REVERSE, '7'),
        (Style.STRIKETHROUGH, '9'),
    ])
    def test_flag_codes(self, style, code):
        """Test each flag's SGR code."""
        assert StyleContext(flags=style).sgr() == f'\x1b[{code}m'

    def test_reset(self):
        """Test reset returns the context to neutral."""
        ctx = StyleContext(fg=Color.parse('red'), flags=Style.DIM)
        ctx.reset()
        assert ctx.neutral

    def test_ansi_reset(self):
        """Test the reset sequence."""
        assert ANSI_RESET == '\x1b[0m'


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
