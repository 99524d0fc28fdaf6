"""Tests for BoardService startup."""

from pathlib import Path

import pytest

from onewip.models import BoardSnapshot, Column, Intent, Mode
from onewip.repositories import BoardLoadError, YamlBoardRepository
from onewip.services import BoardService


@pytest.fixture
def repo(tmp_path: Path) -> YamlBoardRepository:
    return YamlBoardRepository(tmp_path / ".one_wip.yml")


@pytest.fixture
def board_service(repo: YamlBoardRepository) -> BoardService:
    return BoardService(repo)


class TestLoadBoard:
    """Tests for BoardService.load_board()."""

    def test_missing_file_returns_none(self, board_service: BoardService):
        assert board_service.load_board() is None

    def test_loads_stored_board(self, repo: YamlBoardRepository, board_service: BoardService):
        repo.save(BoardSnapshot(todo=["a", "b"], wip="w", done=["x"]))

        board = board_service.load_board()

        assert [t.content for t in board.todo] == ["a", "b"]
        assert board.wip.content == "w"
        assert [t.content for t in board.done] == ["x"]

    def test_loaded_board_selects_todo_with_cursor_on_first(
        self, repo: YamlBoardRepository, board_service: BoardService
    ):
        repo.save(BoardSnapshot(todo=["a", "b"], done=["x"]))

        board = board_service.load_board()

        assert board.selected_column == Column.TODO
        assert board.todo.cursor == 0
        assert board.done.cursor == 0

    def test_corrupt_file_raises(self, repo: YamlBoardRepository, board_service: BoardService):
        repo.board_file.write_text("todo: {not: a list}\n")
        with pytest.raises(BoardLoadError):
            board_service.load_board()


class TestStartSession:
    """Tests for BoardService.start_session()."""

    def test_no_file_starts_in_add_mode(self, board_service: BoardService):
        session = board_service.start_session()
        assert session.mode == Mode.ADD
        assert session.board.is_empty

    def test_empty_board_starts_in_add_mode(
        self, repo: YamlBoardRepository, board_service: BoardService
    ):
        repo.save(BoardSnapshot())
        assert board_service.start_session().mode == Mode.ADD

    def test_stored_board_starts_in_overview(
        self, repo: YamlBoardRepository, board_service: BoardService
    ):
        repo.save(BoardSnapshot(done=["x"]))
        assert board_service.start_session().mode == Mode.OVERVIEW

    def test_session_reports_changes(self, repo: YamlBoardRepository, board_service: BoardService):
        repo.save(BoardSnapshot(todo=["a"]))
        received: list[BoardSnapshot] = []

        session = board_service.start_session(on_change=received.append)
        session.board.select(Column.TODO)
        session.handle(Intent.MOVE_RIGHT)

        assert received == [BoardSnapshot(wip="a")]
