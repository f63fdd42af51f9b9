import pytest

from chiprunner.mapchip import IndexSet, MapChipField, MapChipType, Rect
from chiprunner.vecmath import Vector3


def test_new_field_is_blank_everywhere():
    field = MapChipField()
    assert all(
        field.type_at(x, y) is MapChipType.BLANK
        for y in range(field.num_block_vertical)
        for x in range(field.num_block_horizontal)
    )


def test_dimensions_match_class_constants():
    field = MapChipField()
    assert field.num_block_vertical == MapChipField.NUM_BLOCK_VERTICAL
    assert field.num_block_horizontal == MapChipField.NUM_BLOCK_HORIZONTAL


def test_load_csv_text_maps_each_code():
    field = MapChipField()
    field.load_csv_text("0,1,2,3\n")
    assert field.type_at(0, 0) is MapChipType.BLANK
    assert field.type_at(1, 0) is MapChipType.BLOCK
    assert field.type_at(2, 0) is MapChipType.SAVE_BLOCK
    assert field.type_at(3, 0) is MapChipType.GOAL_BLOCK


def test_unknown_codes_stay_blank():
    field = MapChipField()
    field.load_csv_text("x,1, 1,9\n")
    assert field.type_at(0, 0) is MapChipType.BLANK
    assert field.type_at(1, 0) is MapChipType.BLOCK
    assert field.type_at(2, 0) is MapChipType.BLANK
    assert field.type_at(3, 0) is MapChipType.BLANK


def test_second_line_goes_to_second_row():
    field = MapChipField()
    field.load_csv_text("0\n0,1\n")
    assert field.type_at(1, 1) is MapChipType.BLOCK
    assert field.type_at(1, 0) is MapChipType.BLANK


def test_loading_resets_previous_contents():
    field = MapChipField()
    field.load_csv_text("1,1\n")
    field.load_csv_text("0,1\n")
    assert field.type_at(0, 0) is MapChipType.BLANK
    assert field.type_at(1, 0) is MapChipType.BLOCK


def test_reset_clears_cells():
    field = MapChipField()
    field.load_csv_text("1\n")
    field.reset()
    assert field.type_at(0, 0) is MapChipType.BLANK


def test_load_csv_from_file(tmp_path):
    path = tmp_path / "blocks.csv"
    path.write_text("3,0\n0,2\n", encoding="utf-8")
    field = MapChipField()
    field.load_csv(path)
    assert field.type_at(0, 0) is MapChipType.GOAL_BLOCK
    assert field.type_at(1, 1) is MapChipType.SAVE_BLOCK


def test_load_csv_missing_file_raises(tmp_path):
    field = MapChipField()
    with pytest.raises(FileNotFoundError):
        field.load_csv(tmp_path / "absent.csv")


def test_columns_beyond_width_are_ignored():
    field = MapChipField()
    row = ",".join(["1"] * (MapChipField.NUM_BLOCK_HORIZONTAL + 5))
    field.load_csv_text(row)
    assert field.type_at(MapChipField.NUM_BLOCK_HORIZONTAL - 1, 0) is MapChipType.BLOCK
    assert field.type_at(MapChipField.NUM_BLOCK_HORIZONTAL, 0) is MapChipType.BLANK


@pytest.mark.parametrize(
    "x, y",
    [(-1, 0), (0, -1), (MapChipField.NUM_BLOCK_HORIZONTAL, 0), (0, MapChipField.NUM_BLOCK_VERTICAL)],
)
def test_type_outside_grid_is_blank(x, y):
    field = MapChipField()
    field.load_csv_text("\n".join([",".join(["1"] * 100)] * 20))
    assert field.type_at(x, y) is MapChipType.BLANK


def test_bottom_row_sits_at_height_zero():
    field = MapChipField()
    position = field.position_at(0, MapChipField.NUM_BLOCK_VERTICAL - 1)
    assert position == Vector3(0.0, 0.0, 0.0)


@pytest.mark.parametrize("x, y", [(0, 0), (3, 13), (52, 10), (99, 19), (15, 18)])
def test_index_position_round_trip(x, y):
    field = MapChipField()
    assert field.index_set_at(field.position_at(x, y)) == IndexSet(x, y)


def test_rows_higher_on_screen_have_lower_index():
    field = MapChipField()
    assert field.position_at(0, 5).y > field.position_at(0, 6).y


@pytest.mark.parametrize("x, y", [(0, 0), (7, 12), (99, 19)])
def test_rect_surrounds_cell_centre(x, y):
    field = MapChipField()
    center = field.position_at(x, y)
    rect = field.rect_at(x, y)
    assert isinstance(rect, Rect)
    assert rect.left < center.x < rect.right
    assert rect.bottom < center.y < rect.top
    assert rect.right - rect.left == pytest.approx(MapChipField.BLOCK_WIDTH)
    assert rect.top - rect.bottom == pytest.approx(MapChipField.BLOCK_WIDTH)


def test_adjacent_rects_share_edges():
    field = MapChipField()
    assert field.rect_at(4, 4).right == pytest.approx(field.rect_at(5, 4).left)
    assert field.rect_at(4, 4).bottom == pytest.approx(field.rect_at(4, 5).top)