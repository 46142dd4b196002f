"""Tests for classpath assembly."""

from __future__ import annotations

import pytest

from runjava.classpath import build_classpath, format_classpath
from runjava.errors import ClasspathError


@pytest.fixture
def lib_dir(tmp_path):
    d = tmp_path / "lib"
    d.mkdir()
    return d


class TestFormatClasspath:
    def test_single_line_used_verbatim(self, lib_dir):
        cp = lib_dir / "classpath"
        cp.write_text("/opt/a.jar:/opt/b.jar\n")
        assert format_classpath(cp, lib_dir) == "/opt/a.jar:/opt/b.jar"

    def test_one_entry_per_line(self, lib_dir):
        cp = lib_dir / "classpath"
        cp.write_text("a.jar\nb.jar\nc.jar\n")
        assert format_classpath(cp, lib_dir) == (
            f"{lib_dir}/a.jar:{lib_dir}/b.jar:{lib_dir}/c.jar"
        )

    def test_drops_app_jar(self, lib_dir):
        cp = lib_dir / "classpath"
        cp.write_text("app.jar\nb.jar\n")
        assert format_classpath(cp, lib_dir, lib_dir / "app.jar") == f"{lib_dir}/b.jar"

    def test_skips_blank_lines(self, lib_dir):
        cp = lib_dir / "classpath"
        cp.write_text("a.jar\n\nb.jar\n")
        assert format_classpath(cp, lib_dir) == f"{lib_dir}/a.jar:{lib_dir}/b.jar"

    def test_empty_file(self, lib_dir):
        cp = lib_dir / "classpath"
        cp.write_text("")
        assert format_classpath(cp, lib_dir) == ""

    def test_unreadable(self, lib_dir):
        with pytest.raises(ClasspathError, match="Cannot read"):
            format_classpath(lib_dir / "missing", lib_dir)


class TestBuildClasspath:
    def test_jar_launch_is_just_dot(self, app_dir):
        assert build_classpath(app_dir, app_dir, app_jar=app_dir / "service.jar") == "."

    def test_separate_lib_dir(self, app_dir, lib_dir):
        assert build_classpath(app_dir, lib_dir) == f".:{lib_dir}"

    def test_explicit_replaces_everything(self, app_dir, lib_dir):
        cp = build_classpath(
            app_dir, lib_dir, main_class="com.example.Main", explicit="/x/*:/y.jar"
        )
        assert cp == "/x/*:/y.jar"

    def test_main_class_without_classpath_file(self, app_dir):
        jar = app_dir / "service.jar"
        cp = build_classpath(app_dir, app_dir, app_jar=jar, main_class="com.example.Main")
        assert cp == f".:{jar}:{app_dir}/*"

    def test_main_class_with_classpath_file(self, app_dir, lib_dir):
        (lib_dir / "classpath").write_text("service.jar\ndep.jar\n")
        jar = lib_dir / "service.jar"
        cp = build_classpath(app_dir, lib_dir, app_jar=jar, main_class="com.example.Main")
        assert cp == f".:{lib_dir}:{jar}:{lib_dir}/dep.jar"

    def test_main_class_without_jar(self, app_dir):
        cp = build_classpath(app_dir, app_dir, main_class="com.example.Main")
        assert cp == f".:{app_dir}/*"
