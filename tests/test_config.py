import pytest

from ascii_rasterizer import (
    ChannelWeights,
    CharacterSet,
    ColorMode,
    InvalidConfiguration,
    Presets,
    RasterConfig,
    parse_color,
)


class TestChannelWeights:

    def test_luma_weights_pass(self):
        ChannelWeights(0.299, 0.587, 0.114).validate()

    def test_weights_not_summing_to_one_fail(self):
        with pytest.raises(InvalidConfiguration):
            ChannelWeights(0.2, 0.2, 0.2).validate()

    def test_tolerance_is_tight(self):
        with pytest.raises(InvalidConfiguration):
            ChannelWeights(0.3, 0.3, 0.4 + 1e-6).validate()

    def test_out_of_range_weight_fails(self):
        with pytest.raises(InvalidConfiguration):
            ChannelWeights(1.5, -0.25, -0.25).validate()

    def test_non_numeric_weight_fails(self):
        with pytest.raises(InvalidConfiguration):
            ChannelWeights("0.5", 0.25, 0.25).validate()

    def test_from_percentages(self):
        weights = ChannelWeights.from_percentages(33, 34, 33)
        assert weights.as_tuple() == (0.33, 0.34, 0.33)
        weights.validate()

    def test_percentages_must_total_100(self):
        with pytest.raises(InvalidConfiguration, match="100%"):
            ChannelWeights.from_percentages(30, 30, 30)


class TestRasterConfig:

    def test_defaults_are_valid(self):
        config = RasterConfig()
        config.validate()
        assert config.width == 100
        assert config.charset == CharacterSet.SIMPLE
        assert config.color_mode == ColorMode.MONOCHROME
        assert config.foreground_rgb == (0, 0, 0)
        assert config.background_rgb == (255, 255, 255)

    @pytest.mark.parametrize("width", [0, -3, 2.5, True, "10"])
    def test_bad_width(self, width):
        with pytest.raises(InvalidConfiguration):
            RasterConfig(width=width).validate()

    def test_empty_ramp(self):
        with pytest.raises(InvalidConfiguration, match="empty"):
            RasterConfig(charset="").validate()

    def test_bad_color(self):
        with pytest.raises(InvalidConfiguration):
            RasterConfig(foreground="not-a-color").validate()
        with pytest.raises(InvalidConfiguration):
            RasterConfig(background=(0, 0, 256)).validate()

    def test_bad_weights_rejected(self):
        with pytest.raises(InvalidConfiguration):
            RasterConfig(weights=ChannelWeights(0.2, 0.2, 0.2)).validate()

    def test_bad_color_mode(self):
        with pytest.raises(InvalidConfiguration):
            RasterConfig(color_mode="colored").validate()

    def test_with_options_copies(self):
        base = RasterConfig()
        changed = base.with_options(width=40, invert=True)
        assert changed.width == 40 and changed.invert
        assert base.width == 100 and not base.invert


class TestColors:

    def test_strings(self):
        assert parse_color('#ff0000') == (255, 0, 0)
        assert parse_color('white') == (255, 255, 255)
        assert parse_color('rgb(1,2,3)') == (1, 2, 3)

    def test_tuples(self):
        assert parse_color((10, 20, 30)) == (10, 20, 30)

    @pytest.mark.parametrize("color", [(1, 2), (1.0, 2, 3), (-1, 0, 0), 42])
    def test_rejects(self, color):
        with pytest.raises(InvalidConfiguration):
            parse_color(color)


class TestPresets:

    def test_presets_are_valid(self):
        for preset in (Presets.simple(), Presets.complex(), Presets.colored()):
            preset.validate()

    def test_presets_are_fresh_objects(self):
        first = Presets.simple()
        first.width = 10
        assert Presets.simple().width == 100

    def test_ramps(self):
        assert Presets.simple().charset == " .:-=+*#%@"
        assert Presets.complex().charset == CharacterSet.COMPLEX
        assert Presets.colored().color_mode == ColorMode.SAMPLED
        assert CharacterSet.get_preset('COMPLEX') == CharacterSet.COMPLEX
        assert CharacterSet.get_preset('unknown') == CharacterSet.SIMPLE


class TestNumpyScalars:

    def test_numpy_width_accepted(self):
        import numpy as np
        RasterConfig(width=np.int64(4)).validate()

    def test_numpy_weights_accepted(self):
        import numpy as np
        ChannelWeights(np.float32(0.5), np.float32(0.25), np.float32(0.25)).validate()

    def test_numpy_color_channels(self):
        import numpy as np
        assert parse_color((np.uint8(1), np.int64(2), 3)) == (1, 2, 3)
