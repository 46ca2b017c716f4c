"""
Unit tests for the RevealController
Tests reveals, flood fill, the win / loss state machine, flags and chords
"""

import pytest
from minesweeper.game.board import Board, GameState
from minesweeper.game.cell import Annotation
from minesweeper.game.controller import RevealController, RevealResult
from minesweeper.game.errors import OutOfBounds


def controller_for(rows, cols, mines):
    return RevealController(Board.from_mines(rows, cols, mines))


class TestReveal:
    """Test cases for single cell reveals"""

    @pytest.fixture
    def controller(self):
        """3x3 board with a mine in the top-left corner"""
        return controller_for(3, 3, [(0, 0)])

    def test_reveal_numbered_cell(self, controller):
        """Test revealing a cell next to a mine opens only that cell"""
        result = controller.handle_reveal(1, 1)

        assert result.state_changed is True
        assert result.newly_revealed == {(1, 1, 1)}
        assert result.state == GameState.ACTIVE
        assert controller.board.cell_at(1, 1).is_revealed
        assert controller.board.remaining_safe_tiles == 7

    def test_reveal_same_cell_twice(self, controller):
        """Test that the second reveal is a no-op"""
        controller.handle_reveal(1, 1)
        result = controller.handle_reveal(1, 1)

        assert result == RevealResult.unchanged(GameState.ACTIVE)
        assert controller.board.remaining_safe_tiles == 7

    def test_reveal_flagged_cell(self, controller):
        """Test that flagged cells are protected from reveal"""
        controller.handle_flag_toggle(1, 1)
        result = controller.handle_reveal(1, 1)

        assert result.state_changed is False
        assert controller.board.cell_at(1, 1).is_revealed is False
        assert controller.board.cell_at(1, 1).is_flagged is True

    def test_reveal_questioned_cell(self, controller):
        """Test that question-marked cells are protected from reveal"""
        controller.handle_flag_toggle(1, 1)
        controller.handle_flag_toggle(1, 1)
        result = controller.handle_reveal(1, 1)

        assert result.state_changed is False
        assert controller.board.cell_at(1, 1).is_revealed is False

    def test_reveal_after_clearing_annotation(self, controller):
        """Test that a cell cycled back to clear can be revealed again"""
        for _ in range(3):
            controller.handle_flag_toggle(1, 1)
        result = controller.handle_reveal(1, 1)

        assert result.newly_revealed == {(1, 1, 1)}

    def test_reveal_out_of_bounds(self, controller):
        """Test that a coordinate outside the grid is a caller error"""
        with pytest.raises(OutOfBounds):
            controller.handle_reveal(3, 0)
        with pytest.raises(OutOfBounds):
            controller.handle_reveal(0, -1)


class TestFloodFill:
    """Test cases for zero-region clearing"""

    def test_region_stops_at_numbers(self):
        """Test that the fill covers the zero region and its border only"""
        wall = [(row, 2) for row in range(5)]
        controller = controller_for(5, 5, wall)

        result = controller.handle_reveal(2, 0)

        expected = {(row, col) for row in range(5) for col in (0, 1)}
        assert result.coordinates == expected
        for row, col, count in result.newly_revealed:
            assert count == controller.board.adjacent_mine_count(row, col)
        for row in range(5):
            for col in (3, 4):
                assert controller.board.cell_at(row, col).is_revealed is False
        assert controller.board.remaining_safe_tiles == 10
        assert result.state == GameState.ACTIVE

    def test_border_counts(self):
        """Test the adjacency counts reported along a mine wall"""
        controller = controller_for(5, 5, [(row, 2) for row in range(5)])

        result = controller.handle_reveal(0, 0)

        column_one = {(row, count) for row, col, count in result.newly_revealed if col == 1}
        assert column_one == {(0, 2), (1, 3), (2, 3), (3, 3), (4, 2)}

    def test_three_by_three_cascade(self):
        """Test that a mine-free 3x3 block opens in a single click"""
        controller = controller_for(3, 5, [(0, 4)])

        result = controller.handle_reveal(1, 1)

        block = {(row, col) for row in range(3) for col in range(3)}
        assert block <= result.coordinates
        assert result.state == GameState.WON

    def test_fill_skips_flagged_cells(self):
        """Test that the fill leaves annotated cells alone"""
        controller = controller_for(3, 3, [(2, 2)])
        controller.handle_flag_toggle(0, 0)

        result = controller.handle_reveal(0, 2)

        assert (0, 0) not in result.coordinates
        assert controller.board.cell_at(0, 0).is_flagged is True
        assert len(result.newly_revealed) == 7
        assert controller.board.remaining_safe_tiles == 1
        assert result.state == GameState.ACTIVE

    def test_fill_skips_question_marked_cells(self):
        """Test that a question mark inside a zero region stays hidden and uncounted"""
        controller = controller_for(3, 3, [(2, 2)])
        controller.handle_flag_toggle(0, 0)
        controller.handle_flag_toggle(0, 0)

        result = controller.handle_reveal(0, 2)

        assert (0, 0) not in result.coordinates
        assert controller.board.cell_at(0, 0).is_questioned is True
        assert controller.board.cell_at(0, 0).is_revealed is False
        assert len(result.newly_revealed) == 7
        assert controller.board.remaining_safe_tiles == 1
        assert result.state == GameState.ACTIVE

    def test_large_board_without_recursion_limit(self):
        """Test that a huge zero region is cleared iteratively"""
        controller = controller_for(200, 200, [(199, 199)])

        result = controller.handle_reveal(0, 0)

        assert len(result.newly_revealed) == 200 * 200 - 1
        assert result.state == GameState.WON
        assert controller.board.remaining_safe_tiles == 0


class TestGameOver:
    """Test cases for the win and loss transitions"""

    def test_reveal_mine_loses(self):
        """Test that a mine ends the game and reports every mine"""
        controller = controller_for(3, 3, [(0, 0), (2, 2)])

        result = controller.handle_reveal(0, 0)

        assert result.state == GameState.LOST
        assert result.state_changed is True
        assert result.coordinates == controller.board.mine_locations()
        assert controller.board.detonated == (0, 0)
        assert controller.board.active is False
        assert controller.state == GameState.LOST
        assert controller.board.cell_at(0, 0).is_revealed is True

    def test_loss_keeps_remaining_count(self):
        """Test that hitting a mine does not touch the safe tile counter"""
        controller = controller_for(3, 3, [(0, 0)])
        controller.handle_reveal(0, 0)

        assert controller.board.remaining_safe_tiles == 8

    def test_reveal_all_safe_cells_wins(self):
        """Test that revealing every non-mine cell wins"""
        controller = controller_for(2, 2, [(0, 0)])

        controller.handle_reveal(0, 1)
        controller.handle_reveal(1, 0)
        assert controller.state == GameState.ACTIVE

        result = controller.handle_reveal(1, 1)

        assert result.state == GameState.WON
        assert controller.board.remaining_safe_tiles == 0
        assert controller.board.active is False

    def test_one_by_two_board(self):
        """Test the smallest winnable board"""
        controller = controller_for(1, 2, [(0, 1)])

        result = controller.handle_reveal(0, 0)

        assert result.newly_revealed == {(0, 0, 1)}
        assert controller.board.remaining_safe_tiles == 0
        assert result.state == GameState.WON

    def test_no_actions_after_win(self):
        """Test that a finished game ignores further actions"""
        controller = controller_for(1, 2, [(0, 1)])
        controller.handle_reveal(0, 0)

        assert controller.handle_reveal(0, 1).state_changed is False
        assert controller.handle_flag_toggle(0, 1) is Annotation.NONE
        assert controller.state == GameState.WON
        assert controller.board.remaining_safe_tiles == 0

    def test_no_actions_after_loss(self):
        """Test that a lost game ignores further reveals"""
        controller = controller_for(3, 3, [(0, 0)])
        controller.handle_reveal(0, 0)

        result = controller.handle_reveal(2, 2)

        assert result.state_changed is False
        assert controller.board.cell_at(2, 2).is_revealed is False
        assert controller.state == GameState.LOST


class TestFlagToggle:
    """Test cases for annotations through the controller"""

    @pytest.fixture
    def controller(self):
        return controller_for(3, 3, [(0, 0)])

    def test_three_state_cycle(self, controller):
        """Test flag, question mark, then clear"""
        assert controller.handle_flag_toggle(0, 0) is Annotation.FLAGGED
        assert controller.handle_flag_toggle(0, 0) is Annotation.QUESTIONED
        assert controller.handle_flag_toggle(0, 0) is Annotation.NONE

    def test_revealed_cell_ignored(self, controller):
        """Test that revealed cells cannot be flagged"""
        controller.handle_reveal(1, 1)

        assert controller.handle_flag_toggle(1, 1) is Annotation.NONE
        assert controller.board.cell_at(1, 1).is_flagged is False

    def test_flags_do_not_affect_outcome(self, controller):
        """Test that flagging every mine does not win the game"""
        controller.handle_flag_toggle(0, 0)

        assert controller.state == GameState.ACTIVE
        assert controller.board.remaining_safe_tiles == 8

    def test_toggle_out_of_bounds(self, controller):
        """Test that toggling outside the grid raises"""
        with pytest.raises(OutOfBounds):
            controller.handle_flag_toggle(-1, 0)


class TestChord:
    """Test cases for revealing around a satisfied number"""

    @pytest.fixture
    def controller(self):
        """3x3 board with a single mine and the centre already open"""
        controller = controller_for(3, 3, [(0, 0)])
        controller.handle_reveal(1, 1)
        return controller

    def test_chord_without_flags(self, controller):
        """Test that an unsatisfied number does nothing"""
        result = controller.handle_chord(1, 1)

        assert result.state_changed is False
        assert controller.board.remaining_safe_tiles == 7

    def test_chord_with_correct_flag(self, controller):
        """Test that a satisfied number opens its other neighbours"""
        controller.handle_flag_toggle(0, 0)

        result = controller.handle_chord(1, 1)

        assert result.state_changed is True
        assert (0, 0) not in result.coordinates
        assert result.state == GameState.WON

    def test_chord_with_wrong_flag(self, controller):
        """Test that a misplaced flag loses the game"""
        controller.handle_flag_toggle(0, 1)

        result = controller.handle_chord(1, 1)

        assert result.state == GameState.LOST
        assert controller.board.detonated == (0, 0)

    def test_chord_on_hidden_cell(self):
        """Test that chording an unrevealed cell does nothing"""
        controller = controller_for(3, 3, [(0, 0)])

        assert controller.handle_chord(1, 1).state_changed is False

    def test_chord_on_zero_cell(self):
        """Test that chording an empty cell does nothing"""
        controller = controller_for(3, 4, [(0, 0)])
        controller.handle_reveal(2, 3)

        assert controller.handle_chord(2, 3).state_changed is False
