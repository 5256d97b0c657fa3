"""Tests for mmake.hcl."""

from __future__ import annotations

from pathlib import Path

import hcl2
import pytest

from mmake.hcl import load, read_rules


def _write_hcl(tmp_path: Path, filename: str, content: str) -> Path:
    f = tmp_path / filename
    f.write_text(content)
    return f


class TestLoad:
    def test_load_single_file(self, tmp_path):
        f = _write_hcl(
            tmp_path,
            "mmakefile",
            """
            rule "prog" {
                prerequisites = ["main.o"]
                command = ["cc", "-o", "prog", "main.o"]
            }
        """,
        )
        result = load(f)
        assert "rule" in result

    def test_load_accepts_string_path(self, tmp_path):
        f = _write_hcl(tmp_path, "mmakefile", 'rule "prog" {}\n')
        assert "rule" in load(str(f))

    def test_renders_template_context(self, tmp_path):
        f = _write_hcl(
            tmp_path,
            "mmakefile",
            """
            rule "prog" {
                command = ["{{ cc }}", "main.c"]
            }
        """,
        )
        result = load(f, context={"cc": "clang"})
        assert result["rule"][0]["prog"]["command"] == ["clang", "main.c"]

    def test_undefined_template_variable_raises(self, tmp_path):
        f = _write_hcl(tmp_path, "mmakefile", 'rule "prog" { command = ["{{ cc }}"] }\n')
        with pytest.raises(ValueError, match="mmakefile"):
            load(f)

    def test_syntax_error_raises(self, tmp_path):
        f = _write_hcl(tmp_path, "mmakefile", 'rule "prog" {\n')
        with pytest.raises(ValueError, match="mmakefile"):
            load(f)

    def test_non_parser_errors_propagate(self, tmp_path, monkeypatch):
        f = _write_hcl(tmp_path, "mmakefile", 'rule "prog" {}\n')

        def _explode(text):
            raise RuntimeError("boom")

        monkeypatch.setattr(hcl2, "loads", _explode)
        with pytest.raises(RuntimeError, match="boom"):
            load(f)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load(tmp_path / "absent")


class TestReadRules:
    def test_reads_rules_in_order(self, tmp_path):
        f = _write_hcl(
            tmp_path,
            "mmakefile",
            """
            rule "prog" {
                prerequisites = ["main.o", "util.o"]
                command = ["cc", "-o", "prog", "main.o", "util.o"]
            }

            rule "main.o" {
                prerequisites = ["main.c"]
                command = ["cc", "-c", "main.c"]
            }

            rule "clean" {
                command = ["rm", "-f", "prog", "main.o"]
            }
        """,
        )
        rules = read_rules(f)
        assert list(rules) == ["prog", "main.o", "clean"]
        assert rules["prog"].prerequisites == ("main.o", "util.o")
        assert rules["main.o"].command == ("cc", "-c", "main.c")
        assert rules["clean"].prerequisites == ()
        assert rules.default_target == "prog"

    def test_explicit_default(self, tmp_path):
        f = _write_hcl(
            tmp_path,
            "mmakefile",
            """
            default = "all"

            rule "clean" {}
            rule "all" {}
        """,
        )
        assert read_rules(f).default_target == "all"

    def test_environment_interpolation(self, tmp_path, monkeypatch):
        monkeypatch.setenv("MMAKE_TEST_CC", "tcc")
        f = _write_hcl(tmp_path, "mmakefile", 'rule "prog" { command = ["${env.MMAKE_TEST_CC}", "-v"] }\n')
        assert read_rules(f)["prog"].command == ("tcc", "-v")

    def test_variables_feed_template_and_references(self, tmp_path):
        f = _write_hcl(
            tmp_path,
            "mmakefile",
            'rule "{{ name }}" { command = ["${cc}", "-o", "{{ name }}"] }\n',
        )
        rules = read_rules(f, variables={"name": "app", "cc": "gcc"})
        assert rules["app"].command == ("gcc", "-o", "app")

    def test_undefined_reference_raises(self, tmp_path):
        f = _write_hcl(tmp_path, "mmakefile", 'rule "prog" { command = ["${nope}"] }\n')
        with pytest.raises(ValueError, match="nope"):
            read_rules(f)

    def test_duplicate_rule_raises(self, tmp_path):
        f = _write_hcl(
            tmp_path,
            "mmakefile",
            """
            rule "prog" {}
            rule "prog" {}
        """,
        )
        with pytest.raises(ValueError, match="Duplicate rule: 'prog'"):
            read_rules(f)

    def test_error_names_file(self, tmp_path):
        f = _write_hcl(tmp_path, "rules.hcl", 'rule "prog" { command = 1 }\n')
        with pytest.raises(ValueError, match="rules.hcl"):
            read_rules(f)
