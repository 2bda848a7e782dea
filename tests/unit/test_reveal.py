"""
Unit tests for the reveal engine and win evaluator.

Tests flood-fill containment, termination, idempotence, mine opening,
and win detection.
"""
from conftest import board_with_mines
from minefield.game import Board, is_won, open_all_mines, open_cell


# ============================================================================
# Flood Fill Tests
# ============================================================================

class TestOpenCell:
    """Test flood-fill opening."""

    def test_numbered_cell_opens_alone(self, corner_mines_board: Board) -> None:
        """A numbered cell does not propagate."""
        opened = open_cell(corner_mines_board, 4)
        assert opened == [4]
        assert corner_mines_board.opened_indices() == [4]

    def test_zero_cell_opens_bordering_numbers(
        self, corner_mines_board: Board
    ) -> None:
        """A zero cell opens itself and its numbered neighbours."""
        open_cell(corner_mines_board, 2)
        assert corner_mines_board.opened_indices() == [1, 2, 4, 5]

    def test_empty_board_opens_everything(self, empty_board: Board) -> None:
        """With no mines one open reveals the whole board."""
        opened = open_cell(empty_board, 12)
        assert sorted(opened) == list(range(25))
        assert all(cell.is_opened for cell in empty_board)

    def test_fill_stops_at_numbered_boundary(self, walled_board: Board) -> None:
        """The fill never crosses the numbered cells beside a wall."""
        open_cell(walled_board, 0)
        left_side = {0, 1, 5, 6, 10, 11, 15, 16, 20, 21}
        assert set(walled_board.opened_indices()) == left_side

    def test_fill_order_is_depth_first(self) -> None:
        """Opening order follows up, up-right, right, ... depth first."""
        board = board_with_mines(3, [])
        assert open_cell(board, 4) == [4, 1, 2, 5, 8, 7, 6, 3, 0]

    def test_open_twice_is_idempotent(self, walled_board: Board) -> None:
        """A second open of the same index changes nothing."""
        open_cell(walled_board, 24)
        first = walled_board.opened_indices()
        assert open_cell(walled_board, 24) == []
        assert walled_board.opened_indices() == first

    def test_out_of_range_is_noop(self, corner_mines_board: Board) -> None:
        """Indices outside the board open nothing."""
        assert open_cell(corner_mines_board, -1) == []
        assert open_cell(corner_mines_board, 9) == []
        assert corner_mines_board.opened_indices() == []

    def test_opening_mine_does_not_propagate(
        self, corner_mines_board: Board
    ) -> None:
        """A mine opens alone."""
        assert open_cell(corner_mines_board, 0) == [0]

    def test_large_open_board_does_not_recurse(self) -> None:
        """A board far bigger than the recursion limit fills fine."""
        board = board_with_mines(200, [0])
        opened = open_cell(board, 200 * 200 - 1)
        assert len(opened) == 200 * 200 - 1


# ============================================================================
# Open All Mines Tests
# ============================================================================

class TestOpenAllMines:
    """Test opening every mine on loss."""

    def test_opens_only_mines(self, walled_board: Board) -> None:
        """Every mine is opened and no safe cell is."""
        opened = open_all_mines(walled_board)
        assert opened == [2, 7, 12, 17, 22]
        assert walled_board.opened_indices() == [2, 7, 12, 17, 22]

    def test_skips_already_opened_mines(self, corner_mines_board: Board) -> None:
        """Mines already open are not reported again."""
        corner_mines_board[0].open()
        assert open_all_mines(corner_mines_board) == [8]


# ============================================================================
# Win Evaluator Tests
# ============================================================================

class TestIsWon:
    """Test win detection."""

    def test_new_board_is_not_won(self, corner_mines_board: Board) -> None:
        """Closed safe cells mean no win."""
        assert is_won(corner_mines_board) is False

    def test_all_safe_opened_is_won(self, corner_mines_board: Board) -> None:
        """Opening every safe cell wins, mines still closed."""
        for index in (1, 2, 3, 4, 5, 6, 7):
            corner_mines_board[index].open()
        assert is_won(corner_mines_board) is True

    def test_mine_status_is_irrelevant(self, corner_mines_board: Board) -> None:
        """Opened mines do not affect a win."""
        for cell in corner_mines_board:
            cell.open()
        assert is_won(corner_mines_board) is True

    def test_one_closed_safe_cell_is_not_won(
        self, corner_mines_board: Board
    ) -> None:
        """Even one closed safe cell blocks the win."""
        open_all_mines(corner_mines_board)
        for index in (1, 2, 3, 4, 5, 6):
            corner_mines_board[index].open()
        assert is_won(corner_mines_board) is False

    def test_is_won_has_no_side_effects(self, walled_board: Board) -> None:
        """Evaluating never opens anything."""
        is_won(walled_board)
        assert walled_board.opened_indices() == []
