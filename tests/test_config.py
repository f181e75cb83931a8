"""Tests for render options."""
import pytest

from Ndcore import NDArray, config
from Ndcore.config import RenderOptions


class TestRenderOptionsLoad:
    def test_load_render_table(self, tmp_path):
        path = tmp_path / "ndcore.toml"
        path.write_text('[render]\nthreshold = 10\nseparator = ", "\n')

        options = RenderOptions.load(path)

        assert options.threshold == 10
        assert options.separator == ", "
        assert options.edgeitems == 3

    def test_missing_table_uses_defaults(self, tmp_path):
        path = tmp_path / "ndcore.toml"
        path.write_text("[other]\nvalue = 1\n")
        assert RenderOptions.load(path) == RenderOptions()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RenderOptions.load(tmp_path / "missing.toml")

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "ndcore.toml"
        path.write_text("[render]\nprecision = 3\n")
        with pytest.raises(TypeError):
            RenderOptions.load(path)


class TestRenderOptionsValidation:
    def test_negative_threshold(self):
        with pytest.raises(ValueError):
            RenderOptions(threshold=-1)

    def test_zero_threshold_is_accepted(self):
        assert RenderOptions(threshold=0).threshold == 0

    def test_message_says_non_negative(self):
        with pytest.raises(ValueError, match="non-negative"):
            RenderOptions(threshold=-1)

    def test_edgeitems_at_least_one(self):
        with pytest.raises(ValueError):
            RenderOptions(edgeitems=0)


class TestModuleOptions:
    def test_set_returns_previous(self):
        previous = config.set_render_options(separator=",")
        assert previous == RenderOptions()
        assert config.get_render_options().separator == ","

    def test_set_full_options(self):
        config.set_render_options(RenderOptions(separator="|"))
        assert str(NDArray.from_flat([1, 2])).endswith("1|2")

    def test_context_manager_restores(self):
        with config.render_options(separator=";") as options:
            assert options.separator == ";"
            assert str(NDArray.from_flat([1, 2])).endswith("1;2")
        assert config.get_render_options() == RenderOptions()
