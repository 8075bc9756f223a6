from ascii_rasterizer import AnsiColorFormatter, ColorMode, HtmlFormatter, RasterConfig, convert


def _sampled(solid_image, color):
    config = RasterConfig(width=3, color_mode=ColorMode.SAMPLED, background='black')
    return convert(solid_image(color, (6, 6)), config)


class TestAnsi:

    def test_24bit_codes(self, solid_image):
        artwork = _sampled(solid_image, (255, 0, 0))
        output = AnsiColorFormatter.format_artwork(artwork)
        lines = output.split('\n')
        assert len(lines) == artwork.rows
        assert lines[0].startswith("\033[38;2;255;0;0m\033[48;2;0;0;0m")
        assert all(line.endswith(AnsiColorFormatter.RESET) for line in lines)

    def test_codes_only_emitted_on_change(self, solid_image):
        artwork = _sampled(solid_image, (255, 0, 0))
        line = AnsiColorFormatter.format_artwork(artwork, background=False).split('\n')[0]
        assert line.count("\033[38;2;") == 1

    def test_256_color(self):
        assert AnsiColorFormatter.rgb_to_ansi_256(0, 0, 0) == "\033[38;5;16m"
        assert AnsiColorFormatter.rgb_to_ansi_256(255, 0, 0) == "\033[38;5;196m"
        assert AnsiColorFormatter.rgb_to_ansi_256(255, 255, 255, foreground=False) == "\033[48;5;231m"


class TestHtml:

    def test_spans_carry_colors(self, solid_image):
        artwork = convert(solid_image((255, 255, 255), (2, 2)),
                          RasterConfig(width=2, foreground='#000000', background='#ffffff'))
        html = HtmlFormatter.format_artwork(artwork)
        span = '<span style="color: rgb(0,0,0); background-color: rgb(255,255,255);">@</span>'
        assert html.count(span) == 2
        assert html.startswith("<!DOCTYPE html>")

    def test_characters_are_escaped(self, solid_image):
        artwork = convert(solid_image((255, 255, 255), (2, 2)), RasterConfig(width=2, charset="<"))
        html = HtmlFormatter.format_artwork(artwork)
        assert "&lt;</span>" in html
        assert "><</span>" not in html
