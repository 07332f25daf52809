"""Tests for the upward file locator."""

from pathlib import Path

import pytest

from confwalk.errors import ConfigFileNotFoundError
from confwalk.sources.locator import candidate_directories, find_upwards

MISSING_NAME = "confwalk-never-present-3f9c1e.toml"


def _deep_dir(root: Path, depth: int) -> Path:
    path = root
    for index in range(depth):
        path = path / f"level{index}"
    path.mkdir(parents=True, exist_ok=True)
    return path


class TestFindUpwards:
    """Tests for find_upwards."""

    @pytest.mark.parametrize("levels_up", [0, 1, 3, 6])
    def test_finds_file_above_working_directory(self, tmp_path, monkeypatch, levels_up):
        """The file is found however many levels above the cwd it sits."""
        work = _deep_dir(tmp_path, 6)
        holder = work
        for _ in range(levels_up):
            holder = holder.parent
        target = holder / "app.toml"
        target.write_text('key = "v"\n')

        monkeypatch.chdir(work)
        assert find_upwards("app.toml") == target.resolve()

    def test_uses_explicit_start(self, tmp_path):
        """start overrides the working directory."""
        work = _deep_dir(tmp_path, 2)
        (tmp_path / "app.toml").write_text("")
        assert find_upwards("app.toml", start=work) == (tmp_path / "app.toml").resolve()

    def test_nearest_match_wins(self, tmp_path):
        """The closest ancestor is returned first."""
        work = _deep_dir(tmp_path, 2)
        (tmp_path / "app.toml").write_text("")
        (work.parent / "app.toml").write_text("")
        assert find_upwards("app.toml", start=work) == (work.parent / "app.toml").resolve()

    def test_nested_relative_name(self, tmp_path):
        """Subdirectories in the name are joined to each candidate."""
        work = _deep_dir(tmp_path, 3)
        (tmp_path / "conf").mkdir()
        target = tmp_path / "conf" / "app.toml"
        target.write_text("")
        # A bare app.toml elsewhere must not satisfy conf/app.toml
        (work / "app.toml").write_text("")

        assert find_upwards("conf/app.toml", start=work) == target.resolve()

    def test_directory_with_same_name_is_skipped(self, tmp_path):
        """Only regular files match."""
        work = _deep_dir(tmp_path, 2)
        (work / "app.toml").mkdir()
        (tmp_path / "app.toml").write_text("")
        assert find_upwards("app.toml", start=work) == (tmp_path / "app.toml").resolve()

    def test_absolute_name(self, tmp_path):
        """Absolute names are checked as-is."""
        target = tmp_path / "abs.toml"
        target.write_text("")
        assert find_upwards(target) == target

    def test_missing_file_raises(self, tmp_path):
        """Reaching the root without a match is fatal."""
        work = _deep_dir(tmp_path, 3)
        with pytest.raises(ConfigFileNotFoundError) as exc_info:
            find_upwards(MISSING_NAME, start=work)

        assert MISSING_NAME in str(exc_info.value)
        assert isinstance(exc_info.value, FileNotFoundError)

    def test_missing_absolute_name_raises(self, tmp_path):
        """A missing absolute path is not searched for."""
        with pytest.raises(ConfigFileNotFoundError):
            find_upwards(tmp_path / MISSING_NAME)


def test_candidate_directories_end_at_root(tmp_path):
    """The search chain runs from start to the filesystem root."""
    chain = list(candidate_directories(tmp_path))
    assert chain[0] == tmp_path.resolve()
    assert chain[-1] == Path(tmp_path.resolve().anchor)
