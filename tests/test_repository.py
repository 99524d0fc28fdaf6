"""Integration tests for YamlBoardRepository."""

from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from onewip.models import BoardSnapshot
from onewip.repositories import BoardLoadError, BoardSaveError, YamlBoardRepository


@pytest.fixture
def board_file(tmp_path: Path) -> Path:
    """Path to a board file in a temporary directory."""
    return tmp_path / ".one_wip.yml"


@pytest.fixture
def repo(board_file: Path) -> YamlBoardRepository:
    """Create a repository on the temporary board file."""
    return YamlBoardRepository(board_file)


class TestYamlBoardRepositoryLoad:
    """Tests for loading."""

    def test_missing_file_returns_none(self, repo: YamlBoardRepository):
        """No file yet is not an error."""
        assert repo.load() is None

    def test_load_full_board(self, board_file: Path, repo: YamlBoardRepository):
        board_file.write_text("todo:\n- a\n- b\nwip: w\ndone:\n- x\n")

        snapshot = repo.load()

        assert snapshot == BoardSnapshot(todo=["a", "b"], wip="w", done=["x"])

    def test_missing_keys_default_to_empty(self, board_file: Path, repo: YamlBoardRepository):
        board_file.write_text("todo:\n- a\n")
        snapshot = repo.load()
        assert snapshot.wip is None
        assert snapshot.done == ()

    def test_empty_file_is_empty_board(self, board_file: Path, repo: YamlBoardRepository):
        board_file.write_text("")
        snapshot = repo.load()
        assert snapshot is not None
        assert snapshot.is_empty

    def test_invalid_yaml_raises(self, board_file: Path, repo: YamlBoardRepository):
        board_file.write_text("todo: [unclosed\n")
        with pytest.raises(BoardLoadError, match="Invalid YAML"):
            repo.load()

    def test_non_mapping_raises(self, board_file: Path, repo: YamlBoardRepository):
        board_file.write_text("- just\n- a list\n")
        with pytest.raises(BoardLoadError, match="board mapping"):
            repo.load()

    def test_wrong_types_raise(self, board_file: Path, repo: YamlBoardRepository):
        board_file.write_text("todo: 5\n")
        with pytest.raises(BoardLoadError, match="Invalid board"):
            repo.load()

    def test_blank_entries_raise(self, board_file: Path, repo: YamlBoardRepository):
        board_file.write_text("todo:\n- ''\n")
        with pytest.raises(BoardLoadError):
            repo.load()

    def test_invalid_utf8_raises(self, board_file: Path, repo: YamlBoardRepository):
        """Bytes that are not UTF-8 are a corrupt board, not a crash."""
        board_file.write_bytes(b"todo:\n- caf\xe9\n")
        with pytest.raises(BoardLoadError, match="UTF-8"):
            repo.load()

    def test_reads_utf8_content(self, board_file: Path, repo: YamlBoardRepository):
        board_file.write_bytes("todo:\n- caf\u00e9\n".encode("utf-8"))
        assert repo.load() == BoardSnapshot(todo=["caf\u00e9"])

    def test_unreadable_path_raises(self, tmp_path: Path):
        """A directory where the file should be is unreadable data."""
        path = tmp_path / "board.yml"
        path.mkdir()
        with pytest.raises(BoardLoadError, match="Cannot read"):
            YamlBoardRepository(path).load()


class TestYamlBoardRepositorySave:
    """Tests for saving."""

    def test_save_writes_fields_in_order(self, board_file: Path, repo: YamlBoardRepository):
        repo.save(BoardSnapshot(todo=["a"], wip=None, done=["x"]))

        content = board_file.read_text()
        assert content.index("todo") < content.index("wip") < content.index("done")
        assert yaml.safe_load(content) == {"todo": ["a"], "wip": None, "done": ["x"]}

    def test_save_then_load_round_trip(self, repo: YamlBoardRepository):
        """Saved content comes back unchanged, including unicode."""
        snapshot = BoardSnapshot(todo=["buy milk", "café: 'quotes'"], wip="write #1", done=["a"])
        repo.save(snapshot)
        assert repo.load() == snapshot

    def test_save_overwrites(self, repo: YamlBoardRepository):
        repo.save(BoardSnapshot(todo=["old"]))
        repo.save(BoardSnapshot(done=["new"]))
        assert repo.load() == BoardSnapshot(done=["new"])

    def test_save_creates_parent_directory(self, tmp_path: Path):
        path = tmp_path / "nested" / "dir" / "board.yml"
        YamlBoardRepository(path).save(BoardSnapshot(todo=["a"]))
        assert path.exists()

    def test_save_leaves_no_temp_files(self, tmp_path: Path, repo: YamlBoardRepository):
        repo.save(BoardSnapshot(todo=["a"]))
        assert [p.name for p in tmp_path.iterdir()] == [".one_wip.yml"]

    def test_save_failure_raises(self, tmp_path: Path):
        """A parent path that is a file cannot be written."""
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        repo = YamlBoardRepository(blocker / "board.yml")
        with pytest.raises(BoardSaveError):
            repo.save(BoardSnapshot(todo=["a"]))

    def test_encoding_failure_raises_save_error(self, tmp_path: Path, repo: YamlBoardRepository):
        """Encoding errors while writing are reported as BoardSaveError."""
        failure = UnicodeEncodeError("utf-8", "x", 0, 1, "unencodable")
        with (
            patch("onewip.repositories.yaml_file.yaml.safe_dump", side_effect=failure),
            pytest.raises(BoardSaveError),
        ):
            repo.save(BoardSnapshot(todo=["a"]))

        assert list(tmp_path.iterdir()) == []
