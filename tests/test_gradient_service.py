import numpy as np
import pytest
from PIL import Image

from gradient_generator.models.errors import (
    GradientError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    InvalidSourceError,
    NoSourceImageError,
)
from gradient_generator.models.image_model import ImageData
from gradient_generator.services.gradient_service import generate_gradient, resample

BLACK = [0, 0, 0]
WHITE = [255, 255, 255]


def test_two_pixel_palette_resamples_into_two_bands(gradient_service):
    palette = np.array([BLACK, WHITE], dtype=np.uint8)
    grid = gradient_service.resample(palette, 2, 4, 2)

    assert grid.shape == (2, 4, 3)
    assert grid[0].tolist() == [BLACK] * 4
    assert grid[1].tolist() == [WHITE] * 4


def test_row_index_divides_before_multiplying(gradient_service):
    # 10 // 4 = 2 -> 0, 2, 4, 6 (proportional mapping would give 0, 2, 5, 7)
    indices = gradient_service.row_indices(10, 10, 4)
    assert indices.tolist() == [0, 2, 4, 6]


def test_result_taller_than_source_fails(gradient_service):
    palette = np.array([BLACK, [60, 60, 60], [120, 120, 120], WHITE], dtype=np.uint8)
    with pytest.raises(IndexOutOfRangeError):
        gradient_service.resample(palette, 4, 3, 10)


def test_height_one_past_pixel_count_fails(gradient_service):
    palette = np.array([BLACK, [60, 60, 60], [120, 120, 120], WHITE], dtype=np.uint8)
    # 4 // 5 = 0: zero stride, not a silent single-colour fill
    with pytest.raises(IndexOutOfRangeError):
        gradient_service.resample(palette, 4, 3, 5)


def test_height_equal_to_pixel_count_uses_every_entry(gradient_service):
    palette = np.array([BLACK, [60, 60, 60], [120, 120, 120], WHITE], dtype=np.uint8)
    assert gradient_service.row_indices(4, 4, 4).tolist() == [0, 1, 2, 3]
    grid = gradient_service.resample(palette, 4, 3, 4)
    assert grid[:, 0, :].tolist() == palette.tolist()


def test_index_past_palette_end_fails(gradient_service):
    palette = np.zeros((4, 3), dtype=np.uint8)
    # stride 40 // 10 = 4, row 1 already points past the end
    with pytest.raises(IndexOutOfRangeError, match="Строка 1"):
        gradient_service.resample(palette, 40, 3, 10)


def test_index_out_of_range_is_an_index_error(gradient_service):
    with pytest.raises(IndexError):
        gradient_service.resample(np.zeros((0, 3), dtype=np.uint8), 0, 1, 1)


@pytest.mark.parametrize(
    "width, height",
    [(0, 2), (2, 0), (-1, 2), (2, -5), (2.0, 2), (2, True), ("2", 2)],
)
def test_invalid_dimensions_are_rejected(gradient_service, width, height):
    palette = np.array([BLACK, WHITE], dtype=np.uint8)
    with pytest.raises(InvalidDimensionError):
        gradient_service.resample(palette, 2, width, height)


def test_numpy_integer_dimensions_are_accepted(gradient_service):
    palette = np.array([BLACK, WHITE], dtype=np.uint8)
    grid = gradient_service.resample(palette, 2, np.int64(3), np.int32(2))
    assert grid.shape == (2, 3, 3)


def test_rows_are_uniform_bands(gradient_service, random_grid):
    grid = gradient_service.generate_gradient(random_grid, 7, 5)
    assert grid.shape == (5, 7, 3)
    assert grid.dtype == np.uint8
    assert np.all(grid == grid[:, :1, :])


def test_output_pixels_come_from_palette(gradient_service, palette_service, random_grid):
    palette = palette_service.build_palette(random_grid)
    grid = gradient_service.generate_gradient(random_grid, 3, 6)

    palette_colors = {tuple(c) for c in palette.tolist()}
    assert {tuple(c) for c in grid.reshape(-1, 3).tolist()} <= palette_colors


def test_gradient_runs_dark_to_light(gradient_service, color_service, random_grid):
    grid = gradient_service.generate_gradient(random_grid, 2, 5)
    lightness = color_service.rgb_array_to_hsl(grid[:, 0, :])[:, 2]
    assert np.all(np.diff(lightness) >= 0)


def test_generate_from_pil_image(gradient_service, white_black_image):
    grid = gradient_service.generate_gradient(white_black_image, 4, 2)
    assert grid[0].tolist() == [BLACK] * 4
    assert grid[1].tolist() == [WHITE] * 4


def test_generate_from_image_data(gradient_service, white_black_image, tmp_path):
    data = ImageData(
        path=tmp_path / "src.png",
        pil_image=white_black_image,
        width=2,
        height=1,
        mode="RGB",
        size_bytes=None,
    )
    assert data.pixel_count == 2
    grid = gradient_service.generate_gradient(data, 1, 2)
    assert grid[:, 0].tolist() == [BLACK, WHITE]


@pytest.mark.parametrize("width, height", [(5, 0), (0, 5)])
def test_generate_rejects_zero_dimensions(gradient_service, white_black_image, width, height):
    with pytest.raises(InvalidDimensionError):
        gradient_service.generate_gradient(white_black_image, width, height)


def test_generate_without_image_fails(gradient_service):
    with pytest.raises(NoSourceImageError):
        gradient_service.generate_gradient(None, 4, 4)


def test_generate_with_empty_image_fails(gradient_service):
    with pytest.raises(NoSourceImageError):
        gradient_service.generate_gradient(Image.new("RGB", (0, 0)), 4, 4)


@pytest.mark.parametrize(
    "source",
    [np.zeros((2, 2, 4), dtype=np.uint8), np.zeros((2, 2), dtype=np.uint8)],
)
def test_generate_rejects_non_rgb_array_with_gradient_error(gradient_service, source):
    with pytest.raises(InvalidSourceError) as info:
        gradient_service.generate_gradient(source, 2, 2)
    assert isinstance(info.value, GradientError)


def test_generate_rejects_out_of_range_array(gradient_service):
    with pytest.raises(InvalidSourceError):
        gradient_service.generate_gradient(np.full((2, 2, 3), 300, dtype=np.int64), 2, 2)


def test_bands_merge_equal_rows(gradient_service):
    palette = np.array([BLACK, BLACK, WHITE, WHITE], dtype=np.uint8)
    grid = gradient_service.resample(palette, 4, 5, 4)
    assert gradient_service.bands(grid) == [(0, 2, (0, 0, 0)), (2, 4, (255, 255, 255))]


def test_bands_cover_every_row(gradient_service, random_grid):
    grid = gradient_service.generate_gradient(random_grid, 6, 7)
    bands = gradient_service.bands(grid)
    assert bands[0][0] == 0
    assert bands[-1][1] == 7
    for (_, stop, _), (start, _, _) in zip(bands, bands[1:]):
        assert stop == start
    for start, stop, color in bands:
        assert grid[start:stop].reshape(-1, 3).tolist() == [list(color)] * ((stop - start) * 6)


def test_bands_of_single_row_and_bad_shape(gradient_service):
    assert gradient_service.bands(np.full((1, 3, 3), 7, dtype=np.uint8)) == [(0, 1, (7, 7, 7))]
    assert gradient_service.bands(np.zeros((0, 3, 3), dtype=np.uint8)) == []
    assert gradient_service.bands(np.zeros((2, 2), dtype=np.uint8)) == []


def test_all_core_errors_share_a_base():
    for exc in (IndexOutOfRangeError, InvalidDimensionError, InvalidSourceError, NoSourceImageError):
        assert issubclass(exc, GradientError)


def test_module_level_functions(white_black_image):
    grid = generate_gradient(white_black_image, 2, 2)
    assert np.array_equal(resample(np.array([BLACK, WHITE], dtype=np.uint8), 2, 2, 2), grid)
