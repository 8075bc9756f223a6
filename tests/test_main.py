import pytest
from PIL import Image

import main
from ascii_rasterizer import ColorMode


@pytest.fixture
def white_png(tmp_path, solid_image):
    path = tmp_path / "white.png"
    solid_image((255, 255, 255), (8, 8)).save(path)
    return str(path)


def test_prints_text(white_png, capsys):
    assert main.main([white_png, '-w', '4']) == 0
    assert capsys.readouterr().out == "@@@@\n" * 2


def test_invert_and_custom_charset(white_png, capsys):
    assert main.main([white_png, '-w', '2', '-i', '--charset', 'ab']) == 0
    assert capsys.readouterr().out == "aa\n"


def test_colored_output_uses_ansi(white_png, capsys):
    assert main.main([white_png, '-w', '2', '-c']) == 0
    assert "\033[38;2;255;255;255m" in capsys.readouterr().out


@pytest.mark.parametrize("ext", ['txt', 'png', 'html', 'ansi'])
def test_writes_output_file(white_png, tmp_path, ext, capsys):
    out = tmp_path / f"art.{ext}"
    assert main.main([white_png, '-w', '4', '-o', str(out)]) == 0
    assert out.exists()
    assert "Saved to" in capsys.readouterr().out
    if ext == 'png':
        assert Image.open(out).size == (40, 40)
    if ext == 'txt':
        assert out.read_text(encoding='utf-8') == "@@@@\n@@@@\n"


def test_data_uri_flag(white_png, capsys):
    assert main.main([white_png, '-w', '2', '--data-uri']) == 0
    assert "data:image/png;base64," in capsys.readouterr().out


def test_bad_weights_exit_code(white_png, capsys):
    assert main.main([white_png, '--weights', '0.2', '0.2', '0.2']) == 1
    assert "sum to 1" in capsys.readouterr().err


def test_percent_weights(white_png, capsys):
    assert main.main([white_png, '-w', '2', '--weights', '33', '34', '33', '--percent']) == 0
    assert main.main([white_png, '--weights', '30', '30', '30', '--percent']) == 1


def test_missing_input(tmp_path, capsys):
    assert main.main([str(tmp_path / "missing.png")]) == 1
    assert "Error" in capsys.readouterr().err


def test_rendering_unavailable_exit_code(white_png, monkeypatch, capsys):
    def fail(*args, **kwargs):
        raise main.RenderingUnavailable("no surface")

    monkeypatch.setattr(main.AsciiRasterizer, 'convert', fail)
    assert main.main([white_png]) == 2
    assert "Rendering unavailable" in capsys.readouterr().err


def test_image_to_ascii_helper(solid_image):
    artwork = main.image_to_ascii(solid_image((255, 0, 0), (4, 4)), width=2,
                                  charset='complex', colored=True)
    assert artwork.columns == 2
    assert {cell.foreground for cell in artwork.cells} == {(255, 0, 0)}


def test_build_config_defaults(white_png):
    args = main.create_argument_parser().parse_args([white_png])
    config = main.build_config(args)
    assert config.width == 100
    assert config.color_mode == ColorMode.MONOCHROME
    assert config.weights.as_tuple() == (0.299, 0.587, 0.114)


def test_save_png_default_name(solid_image, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    artwork = main.image_to_ascii(solid_image(), width=2)
    main.save_png(artwork)
    assert (tmp_path / "ascii-art.png").exists()


def test_unwritable_output_exit_code(white_png, tmp_path, capsys):
    out = tmp_path / "missing-dir" / "art.txt"
    assert main.main([white_png, '-w', '4', '-o', str(out)]) == 1
    assert "Error writing" in capsys.readouterr().err
