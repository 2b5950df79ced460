import numpy as np
import pytest

from cubepaint.core.model import (
    CubeModel,
    CubeModelError,
    ErrorCode,
    IllegalMoveError,
    OutOfRangeError,
)
from cubepaint.core.rotation import Face


def blank_grid(side=4):
    return [[False] * side for _ in range(side)]


def faces_of(model):
    return [model.is_painted_face(k) for k in range(6)]


def make_model(side=4, row=1, col=1, painted=None, faces=None):
    model = CubeModel()
    model.initialize(side, row, col, painted if painted is not None else blank_grid(side), faces)
    return model


def test_default_model_is_blank_4x4():
    model = CubeModel()
    assert model.side() == 4
    assert (model.cube_row(), model.cube_col()) == (0, 0)
    assert model.moves() == 0
    assert faces_of(model) == [False] * 6
    assert not any(model.is_painted_square(r, c) for r in range(4) for c in range(4))


def test_initialize_without_faces_gives_blank_cube():
    painted = blank_grid(5)
    painted[2][3] = True
    model = make_model(side=5, row=2, col=3, painted=painted)
    assert model.side() == 5
    assert (model.cube_row(), model.cube_col()) == (2, 3)
    assert model.is_painted_square(2, 3)
    assert faces_of(model) == [False] * 6
    assert not model.all_faces_painted()


def test_initialize_resets_move_counter():
    model = make_model()
    model.move(0, 1)
    assert model.moves() == 1
    model.initialize(4, 2, 2, blank_grid())
    assert model.moves() == 0


def test_initialize_copies_caller_arrays():
    painted = blank_grid()
    faces = [False] * 6
    model = make_model(painted=painted, faces=faces)
    painted[0][0] = True
    faces[0] = True
    assert not model.is_painted_square(0, 0)
    assert not model.is_painted_face(0)


def test_initialize_precondition_asserted():
    model = CubeModel()
    with pytest.raises(AssertionError):
        model.initialize(2, 0, 0, blank_grid(2))
    with pytest.raises(AssertionError):
        model.initialize(4, 0, 0, blank_grid(3))
    with pytest.raises(AssertionError):
        model.initialize(4, 4, 0, blank_grid(4))
    with pytest.raises(AssertionError):
        model.initialize(4, 0, 0, blank_grid(4), [True] * 5)


def test_concrete_scenario_blank_cube():
    """Cube at (1, 1) on a painted cell rolls onto the blank cell (0, 1)."""
    painted = blank_grid()
    painted[1][1] = True
    model = make_model(painted=painted)

    model.move(0, 1)

    assert faces_of(model) == [False] * 6
    assert not model.is_painted_square(0, 1)
    assert model.is_painted_square(1, 1)
    assert (model.cube_row(), model.cube_col()) == (0, 1)
    assert model.moves() == 1


def test_roll_toward_row_zero_every_face():
    # front, right and top painted
    faces = [True, False, False, True, False, True]
    model = make_model(faces=faces)

    model.move(0, 1)

    assert model.is_painted_face(Face.FRONT)       # old top
    assert not model.is_painted_face(Face.BACK)    # old bottom
    assert not model.is_painted_face(Face.LEFT)
    assert model.is_painted_face(Face.RIGHT)
    assert not model.is_painted_face(Face.BOTTOM)  # old front, swapped with the blank cell
    assert not model.is_painted_face(Face.TOP)     # old back
    assert model.is_painted_square(0, 1)           # received the old front paint


def test_roll_right_every_face():
    # front, left and top painted
    faces = [True, False, True, False, False, True]
    painted = blank_grid()
    painted[1][2] = True
    model = make_model(painted=painted, faces=faces)

    model.move(1, 2)

    assert faces_of(model) == [True, False, False, True, True, True]
    assert not model.is_painted_square(1, 2)
    assert (model.cube_row(), model.cube_col()) == (1, 2)


def test_roll_left_every_face():
    # back, right and bottom painted
    faces = [False, True, False, True, True, False]
    model = make_model(faces=faces)

    model.move(1, 0)

    # left<-top, right<-bottom, bottom<-left (then swapped with blank cell), top<-right
    assert faces_of(model) == [False, True, False, True, False, True]
    assert not model.is_painted_square(1, 0)


def test_roll_toward_last_row_every_face():
    # back and bottom painted
    faces = [False, True, False, False, True, False]
    painted = blank_grid()
    painted[2][1] = True
    model = make_model(painted=painted, faces=faces)

    model.move(2, 1)

    # front<-bottom, back<-top, bottom<-back (then swapped with painted cell), top<-front
    assert faces_of(model) == [True, False, False, False, True, False]
    assert model.is_painted_square(2, 1)


def test_winning_move():
    faces = [True, True, True, False, True, True]
    painted = blank_grid()
    painted[1][2] = True
    model = make_model(painted=painted, faces=faces)
    assert not model.all_faces_painted()

    model.move(1, 2)

    assert model.all_faces_painted()
    assert model.moves() == 1


def test_initial_state_can_already_be_won():
    model = make_model(faces=[True] * 6)
    assert model.all_faces_painted()


@pytest.mark.parametrize("target", [(4, 1), (1, 4), (1, -1), (-1, 1), (10, 10)])
def test_move_off_board_is_out_of_range(target):
    model = make_model()
    with pytest.raises(OutOfRangeError):
        model.move(*target)
    assert model.moves() == 0
    assert (model.cube_row(), model.cube_col()) == (1, 1)


@pytest.mark.parametrize("target", [(0, 0), (2, 2), (0, 2), (2, 0), (1, 1), (1, 3), (3, 1)])
def test_non_adjacent_move_is_illegal(target):
    faces = [True, False, True, False, True, False]
    model = make_model(faces=faces)
    with pytest.raises(IllegalMoveError) as excinfo:
        model.move(*target)
    assert excinfo.value.error is ErrorCode.ILLEGAL_MOVE
    assert model.moves() == 0
    assert faces_of(model) == faces


def test_error_kinds_share_a_base():
    assert issubclass(OutOfRangeError, CubeModelError)
    assert issubclass(IllegalMoveError, CubeModelError)
    assert issubclass(CubeModelError, ValueError)
    assert OutOfRangeError.error is ErrorCode.OUT_OF_RANGE


def test_is_painted_square_rejects_both_bounds():
    model = make_model()
    for row, col in [(4, 0), (0, 4), (-1, 0), (0, -1)]:
        with pytest.raises(OutOfRangeError):
            model.is_painted_square(row, col)


def test_is_painted_face_rejects_bad_index():
    model = make_model()
    with pytest.raises(OutOfRangeError):
        model.is_painted_face(6)
    with pytest.raises(OutOfRangeError):
        model.is_painted_face(-1)


def test_queries_have_no_side_effects():
    model = make_model(faces=[True, False, True, False, True, False])
    first = (model.side(), model.cube_row(), model.cube_col(), model.moves(),
             faces_of(model), model.is_painted_square(1, 1), model.all_faces_painted())
    second = (model.side(), model.cube_row(), model.cube_col(), model.moves(),
              faces_of(model), model.is_painted_square(1, 1), model.all_faces_painted())
    assert first == second


def test_move_counter_counts_only_successful_moves():
    model = make_model()
    attempts = [(0, 1), (0, 1), (0, 2), (5, 5), (1, 2), (3, 3), (1, 3), (0, 3)]
    expected = 0
    for target in attempts:
        try:
            model.move(*target)
            expected += 1
        except CubeModelError:
            pass
        assert model.moves() == expected
    assert expected == 5


def test_painted_count_conserved():
    rng = np.random.default_rng(3)
    side = 5
    painted = (rng.random((side, side)) < 0.5).tolist()
    faces = (rng.random(6) < 0.5).tolist()
    model = make_model(side=side, row=2, col=2, painted=painted, faces=faces)

    total = model.painted_count()
    for step in range(200):
        dr, dc = [(0, 1), (0, -1), (1, 0), (-1, 0)][rng.integers(4)]
        try:
            model.move(model.cube_row() + dr, model.cube_col() + dc)
        except OutOfRangeError:
            continue
        assert model.painted_count() == total
        assert model.all_faces_painted() == all(faces_of(model))


def test_round_trip_restores_faces_when_swaps_are_noops():
    # Only the cube's front is painted; the front lands on the bottom going to
    # row 0, so painting that cell makes the bottom swap a no-op.
    painted = blank_grid()
    painted[0][1] = True
    faces = [True, False, False, False, False, False]
    model = make_model(painted=painted, faces=faces)

    model.move(0, 1)
    assert model.is_painted_face(Face.BOTTOM)
    model.move(1, 1)

    assert faces_of(model) == faces
    assert model.is_painted_square(0, 1)
    assert (model.cube_row(), model.cube_col()) == (1, 1)
    assert model.moves() == 2


def test_round_trip_with_painted_top_on_blank_board():
    # the top never reaches the bottom on a single roll, so every swap is a no-op
    faces = [False, False, False, False, False, True]
    model = make_model(faces=faces)
    for there, back in [((0, 1), (1, 1)), ((2, 1), (1, 1)), ((1, 0), (1, 1)), ((1, 2), (1, 1))]:
        model.move(*there)
        model.move(*back)
        assert faces_of(model) == faces


def test_copy_is_independent():
    painted = blank_grid()
    painted[0][1] = True
    original = make_model(painted=painted, faces=[True, False, False, False, False, False])
    original.move(1, 2)

    clone = CubeModel.copy(original)
    assert clone.side() == original.side()
    assert (clone.cube_row(), clone.cube_col()) == (1, 2)
    assert clone.moves() == 1
    assert faces_of(clone) == faces_of(original)

    clone.move(0, 2)
    clone.move(0, 1)
    assert original.moves() == 1
    assert (original.cube_row(), original.cube_col()) == (1, 2)
    assert original.is_painted_square(0, 1)
    assert faces_of(original) == [True, False, False, False, False, False]


def test_observers_notified_on_success_only():
    model = make_model()
    calls = []
    model.add_observer(calls.append)
    model.add_observer(calls.append)
    assert model.count_observers() == 1

    model.move(0, 1)
    assert calls == [model]

    with pytest.raises(IllegalMoveError):
        model.move(0, 1)
    with pytest.raises(OutOfRangeError):
        model.move(-1, 1)
    assert len(calls) == 1

    model.initialize(4, 0, 0, blank_grid())
    assert len(calls) == 2

    model.copy_from(CubeModel())
    assert len(calls) == 3

    model.remove_observer(calls.append)
    model.move(0, 1)
    assert len(calls) == 3
    assert model.count_observers() == 0


def test_observer_reads_updated_state():
    model = make_model()
    seen = []
    model.add_observer(lambda m: seen.append((m.cube_row(), m.cube_col(), m.moves())))
    model.move(1, 2)
    assert seen == [(1, 2, 1)]
