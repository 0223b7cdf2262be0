"""Tests for css_colours.core.css — constructors and to_css."""

from css_colours import RGB, RGBA, rgb, rgba, to_css


class TestConstructors:
    def test_rgb(self):
        assert rgb(5, 10, 15) == RGB(r=5, g=10, b=15)

    def test_rgba(self):
        assert rgba(5, 10, 15, 1.0) == RGBA(r=5, g=10, b=15, a=1.0)

    def test_rgba_accepts_any_alpha(self):
        assert rgba(5, 10, 15, 3.0).a == 3.0

    def test_salmon(self):
        assert rgb(250, 128, 114).to_css() == 'rgb(250, 128, 114)'

    def test_light_salmon(self):
        assert rgba(250, 128, 114, 0.5).to_css() == 'rgba(250, 128, 114, 0.5)'

    def test_opaque_rgba_renders_alpha_as_one(self):
        assert rgba(5, 10, 255, 1.0).to_css() == 'rgba(5, 10, 255, 1)'

    def test_tomato_with_alpha(self):
        assert rgb(255, 99, 71).to_rgba() == rgba(255, 99, 71, 1.0)


class TestToCss:
    def test_every_channel_value(self):
        for v in range(256):
            assert to_css(rgb(v, 255 - v, v)) == f'rgb({v}, {255 - v}, {v})'

    def test_rgba(self):
        for a, text in [(0.0, '0'), (0.25, '0.25'), (0.5, '0.5'), (1.0, '1')]:
            assert to_css(rgba(1, 2, 3, a)) == f'rgba(1, 2, 3, {text})'

    def test_drop_alpha_keeps_channels(self):
        colour = rgba(12, 34, 56, 0.2).to_rgb()
        assert (colour.r, colour.g, colour.b) == (12, 34, 56)
