"""Integration tests for RealDependencyDetector."""

from pathlib import Path

from assetcache.gateway.detector.real import RealDependencyDetector, parse_locked_dependencies

GEMFILE_LOCK = """\
GEM
  remote: https://rubygems.org/
  specs:
    actionpack (3.2.13)
      rack (~> 1.4.5)
    pg (0.15.1)
    sprockets (2.2.2)
      hike (~> 1.2)

PLATFORMS
  ruby

DEPENDENCIES
  mysql2
  pg
"""


def test_parse_locked_dependencies_reads_specs_only() -> None:
    names = parse_locked_dependencies(GEMFILE_LOCK)

    assert names == frozenset({"actionpack", "pg", "sprockets"})


def test_is_bundled(tmp_path: Path) -> None:
    (tmp_path / "Gemfile.lock").write_text(GEMFILE_LOCK, encoding="utf-8")
    detector = RealDependencyDetector(tmp_path)

    assert detector.is_bundled("pg") is True
    # Nested requirement lines and the DEPENDENCIES section are not locked specs
    assert detector.is_bundled("rack") is False
    assert detector.is_bundled("mysql2") is False


def test_is_bundled_without_lockfile(tmp_path: Path) -> None:
    assert RealDependencyDetector(tmp_path).is_bundled("pg") is False


def test_build_step_applies_when_rakefile_present(tmp_path: Path) -> None:
    detector = RealDependencyDetector(tmp_path)
    assert detector.build_step_applies() is False

    (tmp_path / "Rakefile").write_text("", encoding="utf-8")
    assert detector.build_step_applies() is True
