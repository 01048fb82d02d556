"""
Tests for the batch configuration and runner.
"""

import pytest

from chainorder.core.errors import NonPositiveDimension
from chainorder.pipeline.config_parser import (
    load_config,
    parse_pipe_table,
    parse_bool,
    parse_dimensions,
    parse_chains_table,
)
from chainorder.pipeline.runner import BatchRunner, run_pipeline


CONFIG = """\
chains: |
  Name   | Dimensions            | Parenthesize | Show table
  ------ | --------------------- | ------------ | ----------
  clrs   | 30,35,15,5,10,20,25   | yes          | no
  small  | 2,5,4,1,10            | no           | yes
"""


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "chains.yaml"
    path.write_text(CONFIG)
    return str(path)


class TestParsing:
    """Pipe-table helpers."""

    def test_pipe_table(self):
        rows = parse_pipe_table("""
            A  | B
            -- | --
            1  | x
            2  |
        """)
        assert rows == [{"A": "1", "B": "x"}, {"A": "2", "B": ""}]

    def test_header_only(self):
        assert parse_pipe_table("A | B") == []

    def test_parse_bool(self):
        assert parse_bool("Yes")
        assert parse_bool("on")
        assert not parse_bool("no")
        assert parse_bool("", default=True)
        assert not parse_bool("  ")

    def test_parse_dimensions(self):
        assert parse_dimensions("30,35, 15") == [30, 35, 15]
        assert parse_dimensions("2 5 4") == [2, 5, 4]

    def test_parse_dimensions_rejects_text(self):
        with pytest.raises(ValueError):
            parse_dimensions("2,five,4")

    def test_defaults(self):
        entries = parse_chains_table("""
            Dimensions
            ----------
            2,3,4
        """)
        assert len(entries) == 1
        assert entries[0].name == "chain_0"
        assert entries[0].dims == [2, 3, 4]
        assert entries[0].parenthesize is True
        assert entries[0].show_table is False


class TestLoadConfig:
    """YAML loading."""

    def test_entries(self, config_path):
        config = load_config(config_path)

        assert [e.name for e in config.chains] == ["clrs", "small"]
        assert config.chains[0].dims == [30, 35, 15, 5, 10, 20, 25]
        assert config.chains[1].parenthesize is False
        assert config.chains[1].show_table is True
        assert "chains" in config.raw_yaml

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)).chains == []

    def test_top_level_must_be_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 2,3,4\n- 5,6\n")
        with pytest.raises(ValueError, match="mapping"):
            load_config(str(path))

    def test_chains_must_be_table_text(self, tmp_path):
        path = tmp_path / "nested.yaml"
        path.write_text("chains:\n  - 2,3,4\n")
        with pytest.raises(ValueError, match="pipe-delimited"):
            load_config(str(path))


class TestBatchRunner:
    """Batch solving."""

    def test_run_pipeline(self, config_path):
        results = run_pipeline(config_path, verbose=False)

        assert [r.min_cost for r in results] == [15125, 50]
        assert results[0].order == "((A1 * (A2 * A3)) * ((A4 * A5) * A6))"
        assert results[1].order is None

    def test_verbose_output(self, config_path, capsys):
        run_pipeline(config_path, verbose=True)
        out = capsys.readouterr().out

        assert "[CHAINORDER] Solving 2 chains" in out
        assert "[CHAINORDER] clrs: 6 matrices, min cost 15125" in out
        assert "[CHAINORDER] clrs: ((A1 * (A2 * A3)) * ((A4 * A5) * A6))" in out

    def test_invalid_chain_is_named(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text(
            "chains: |\n"
            "  Name | Dimensions\n"
            "  ---- | ----------\n"
            "  ok   | 2,3,4\n"
            "  bad  | 2,0,4\n"
        )
        runner = BatchRunner(load_config(str(path)), verbose=False)

        with pytest.raises(NonPositiveDimension, match="Chain 'bad'"):
            runner.run_all()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
