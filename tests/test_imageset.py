import pygame
import pytest

from spacerocks.imageset import FrameSet, ImageSet, ImageSetError, parse_config

RED = (255, 0, 0)
BLACK = (0, 0, 0)


def make_sheet():
    image = pygame.Surface((40, 40))
    image.fill(BLACK)
    image.fill(RED, pygame.Rect(0, 0, 5, 5))
    sets = [FrameSet(row=0, frame_count=3, width=5, height=5),
            FrameSet(row=2, frame_count=2, width=4, height=3)]
    return ImageSet(image, columns=2, cell_width=6, cell_height=6, sets=sets)


def test_parse_config_reads_header_and_sets():
    text = "bmpImages/rocks.bmp\n2 4 30 30\n0 4 30 30\n1 3 20 18\n"
    name, columns, cell_w, cell_h, sets = parse_config(text)
    assert name == "bmpImages/rocks.bmp"
    assert (columns, cell_w, cell_h) == (4, 30, 30)
    assert sets == [FrameSet(0, 4, 30, 30), FrameSet(1, 3, 20, 18)]


def test_parse_config_rejects_missing_sets():
    with pytest.raises(ImageSetError):
        parse_config("sheet.bmp\n3 4 30 30\n0 4 30 30\n")


def test_parse_config_rejects_garbage():
    with pytest.raises(ImageSetError):
        parse_config("sheet.bmp\n1 four 30 30\n0 4 30 30\n")


def test_parse_config_rejects_zero_columns():
    with pytest.raises(ImageSetError):
        parse_config("sheet.bmp\n1 0 30 30\n0 4 30 30\n")


def test_source_rect_uses_set_size():
    sheet = make_sheet()
    rect = sheet.source_rect(1, 0)
    assert rect.size == (4, 3)


def test_source_rect_steps_over_gutter_between_columns():
    sheet = make_sheet()
    first = sheet.source_rect(0, 0)
    second = sheet.source_rect(0, 1)
    assert second.top == first.top
    assert second.left - first.left == sheet.cell_width + 1


def test_source_rect_wraps_to_next_row_after_last_column():
    sheet = make_sheet()
    first = sheet.source_rect(0, 0)
    wrapped = sheet.source_rect(0, sheet.columns)
    assert wrapped.left == first.left
    assert wrapped.top - first.top == sheet.cell_height + 1


def test_next_frame_cycles_through_set():
    sheet = make_sheet()
    frames = [0]
    for _ in range(sheet.sets[0].frame_count):
        frames.append(sheet.next_frame(0, frames[-1]))
    assert frames[-1] == 0
    assert sorted(set(frames)) == list(range(sheet.sets[0].frame_count))


def test_set_count():
    assert make_sheet().set_count == 2


def test_draw_blits_frame_at_position():
    sheet = make_sheet()
    target = pygame.Surface((50, 50))
    target.fill((0, 0, 255))
    sheet.draw(target, 0, 0, 10, 10)
    assert target.get_at((10, 10))[:3] == RED
    assert target.get_at((9, 9))[:3] == (0, 0, 255)


def test_draw_without_surface_is_harmless():
    sheet = make_sheet()
    sheet.draw(None, 0, 0, 10, 10)
    assert sheet.next_frame(0, 0) == 1


def test_draw_rotated_centres_frame_on_position():
    sheet = make_sheet()
    target = pygame.Surface((50, 50))
    target.fill((0, 0, 255))
    sheet.draw_rotated(target, 0, 0, 25, 25, 0.0)
    assert target.get_at((25, 25))[:3] == RED
    assert target.get_at((10, 10))[:3] == (0, 0, 255)


def test_from_config_loads_image(tmp_path):
    image = pygame.Surface((12, 12))
    image.fill(RED)
    image_path = tmp_path / "sheet.bmp"
    pygame.image.save(image, str(image_path))
    config = tmp_path / "sheet.txt"
    config.write_text(f"{image_path}\n1 2 5 5\n0 2 5 5\n")
    sheet = ImageSet.from_config(config)
    assert sheet.image.get_size() == (12, 12)
    assert sheet.sets == [FrameSet(0, 2, 5, 5)]
    assert sheet.image.get_colorkey()[:3] == BLACK


def test_from_config_missing_image(tmp_path):
    config = tmp_path / "sheet.txt"
    config.write_text(f"{tmp_path / 'absent.bmp'}\n1 2 5 5\n0 2 5 5\n")
    with pytest.raises(ImageSetError):
        ImageSet.from_config(config)


def test_from_config_missing_file(tmp_path):
    with pytest.raises(ImageSetError):
        ImageSet.from_config(tmp_path / "nothing.txt")