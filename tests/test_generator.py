"""Tests for the generation driver."""

from pathlib import Path

import pytest

from boilergen import generate
from boilergen.engine import (
    HEADER,
    ArityRange,
    GenerationWriteError,
    PatternTemplate,
    TemplateConfigurationError,
    block,
    preamble,
)
from boilergen.generation import BoilerplateGenerator, GeneratedFile, write_text


class ItemTemplate(PatternTemplate):
    file_name = "Items.txt"

    def content(self, tv, max_arity):
        return block(f"""
            |OPEN
            -ITEM({tv.arity})
            |CLOSE
        """)


class BrokenTemplate(PatternTemplate):
    file_name = "Broken.txt"

    def content(self, tv, max_arity):
        return preamble("only a preamble")


@pytest.fixture
def generator():
    return BoilerplateGenerator(
        templates=[ItemTemplate("first", ""), ItemTemplate("second", "")],
        arity_range=ArityRange(2, 3),
        namespace=("pkg", "sub"),
    )


def read_tree(root: Path) -> dict[str, str]:
    return {str(p.relative_to(root)): p.read_text() for p in sorted(root.rglob("*")) if p.is_file()}


class TestCompute:
    """Test body computation without a filesystem."""

    def test_paths_under_namespace(self, generator):
        files = generator.compute(Path("/out"))
        assert [f.path for f in files] == [Path("/out/pkg/sub/Items.txt")] * 2

    def test_bodies(self, generator):
        files = generator.compute(Path("/out"))
        assert files[0].body == HEADER + "\nOPEN\nITEM(2)\nITEM(3)\nCLOSE"

    def test_stats(self, generator):
        generator.compute(Path("/out"))
        assert generator.template_stats["first"]["instance_lines"] == 2
        assert generator.template_stats["first"]["arities"] == 2

    def test_each_arity_rendered_once(self):
        rendered = []

        class CountingTemplate(ItemTemplate):
            def content(self, tv, max_arity):
                rendered.append(tv.arity)
                return super().content(tv, max_arity)

        generator = BoilerplateGenerator(
            templates=[CountingTemplate("counted", "")], arity_range=ArityRange(2, 5)
        )
        generator.compute(Path("/out"))
        assert rendered == [2, 3, 4, 5]
        assert generator.template_stats["counted"]["instance_lines"] == 4

    def test_configuration_error_before_any_write(self, tmp_path):
        generator = BoilerplateGenerator(
            templates=[ItemTemplate("ok", ""), BrokenTemplate("broken", "")],
            arity_range=ArityRange(2, 3),
        )
        with pytest.raises(TemplateConfigurationError):
            generator.generate(tmp_path)
        assert list(tmp_path.iterdir()) == []


class TestWriteAll:
    """Test writing and failure propagation."""

    def test_write_text_creates_parents_and_overwrites(self, tmp_path):
        path = tmp_path / "a" / "b" / "file.txt"
        write_text(path, "first version, longer")
        write_text(path, "second")
        assert path.read_text() == "second"

    def test_fail_fast(self, tmp_path):
        calls = []

        def writer(path, text):
            calls.append(path)
            if path.name == "2.txt":
                raise PermissionError("read-only")
            write_text(path, text)

        files = [GeneratedFile(tmp_path / f"{n}.txt", str(n)) for n in (1, 2, 3)]
        generator = BoilerplateGenerator(templates=[])

        with pytest.raises(GenerationWriteError) as excinfo:
            generator.write_all(files, writer)

        assert excinfo.value.path == tmp_path / "2.txt"
        assert isinstance(excinfo.value.__cause__, PermissionError)
        assert calls == [tmp_path / "1.txt", tmp_path / "2.txt"]
        assert (tmp_path / "1.txt").read_text() == "1"
        assert not (tmp_path / "3.txt").exists()

    def test_returns_paths_in_order(self, tmp_path):
        files = [GeneratedFile(tmp_path / name, name) for name in ("b", "a", "c")]
        paths = BoilerplateGenerator(templates=[]).write_all(files)
        assert paths == [tmp_path / "b", tmp_path / "a", tmp_path / "c"]


class TestGenerate:
    """Test full runs with the registered patterns."""

    def test_default_generate(self, tmp_path):
        paths = generate(tmp_path)
        base = tmp_path / "jto" / "validation"
        assert paths == [
            base / "InvariantSyntax.scala",
            base / "FunctorSyntax.scala",
            base / "ContravariantSyntax.scala",
        ]
        for path in paths:
            assert path.read_text().startswith(HEADER)

    def test_idempotent(self, tmp_path):
        first_root = tmp_path / "first"
        second_root = tmp_path / "second"
        generate(first_root)
        generate(second_root)
        generate(second_root)
        assert read_tree(first_root) == read_tree(second_root)

    def test_overwrites_stale_files(self, tmp_path):
        stale = tmp_path / "jto" / "validation" / "FunctorSyntax.scala"
        write_text(stale, "stale\n" * 10000)
        generate(tmp_path)
        assert "stale" not in stale.read_text()

    def test_verbose_prints_stats(self, tmp_path, capsys):
        generator = BoilerplateGenerator(arity_range=ArityRange(2, 4), verbose=True)
        generator.generate(tmp_path)
        out = capsys.readouterr().out
        assert "Files written: 3" in out
        assert "functor:" in out
