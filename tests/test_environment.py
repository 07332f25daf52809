"""Tests for the environment snapshot."""

from confwalk.sources.environment import snapshot_environment


class TestSnapshotEnvironment:
    """Tests for snapshot_environment."""

    def test_flat_string_keys(self):
        """Every variable becomes a flat key, case kept."""
        snap = snapshot_environment({"Host": "a", "HOST": "b"})
        assert snap.values == {"Host": "a", "HOST": "b"}
        assert len(snap) == 2

    def test_reads_os_environ_by_default(self, monkeypatch):
        """Without a mapping, os.environ is used."""
        monkeypatch.setenv("CONFWALK_TEST_VALUE", "42")
        snap = snapshot_environment()
        assert snap.values["CONFWALK_TEST_VALUE"] == "42"

    def test_snapshot_is_not_live(self, monkeypatch):
        """Later environment changes do not reach an existing snapshot."""
        monkeypatch.setenv("CONFWALK_TEST_VALUE", "before")
        snap = snapshot_environment()
        monkeypatch.setenv("CONFWALK_TEST_VALUE", "after")
        assert snap.values["CONFWALK_TEST_VALUE"] == "before"

    def test_prefix_filters_and_strips(self):
        """Only prefixed variables are kept, without the prefix."""
        snap = snapshot_environment(
            {"APP_PORT": "80", "APP_": "x", "app_HOST": "y", "PATH": "/bin"},
            prefix="APP_",
        )
        assert snap.values == {"PORT": "80"}
        assert snap.skipped == ["APP_"]

    def test_unrepresentable_entries_are_skipped(self):
        """Non-string entries are skipped and the rest still merge."""
        snap = snapshot_environment({"GOOD": "1", "BAD": 2, 3: "x"})
        assert snap.values == {"GOOD": "1"}
        assert sorted(snap.skipped) == ["3", "BAD"]

    def test_dotenv_beneath_process_environment(self, tmp_path):
        """.env entries are included; process variables win."""
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("A=dotenv\nB=dotenv\nFLAG\n")

        snap = snapshot_environment({"A": "process"}, dotenv_path=dotenv_file)

        assert snap.values == {"A": "process", "B": "dotenv"}
        assert snap.skipped == ["FLAG"]
        assert snap.dotenv_path == str(dotenv_file)

    def test_missing_dotenv_is_ignored(self, tmp_path):
        """A missing .env file contributes nothing."""
        snap = snapshot_environment({"A": "1"}, dotenv_path=tmp_path / ".env")
        assert snap.values == {"A": "1"}
        assert snap.dotenv_path is None
