import pytest

from image_editor.models.errors import UsageError
from image_editor.pipeline.apply_filter import apply_filter, available_filters, validate_filter_args


def test_available_filters():
    assert set(available_filters()) == {"grayscale", "greyscale", "invert", "emboss", "motionblur"}


@pytest.mark.parametrize("name", ["grayscale", "greyscale", "invert", "emboss"])
def test_plain_filters_take_no_arguments(name):
    assert validate_filter_args(name, []) == ()
    with pytest.raises(UsageError):
        validate_filter_args(name, ["3"])


def test_motionblur_parses_length():
    assert validate_filter_args("motionblur", ["4"]) == (4,)
    assert validate_filter_args("motionblur", ["0"]) == (0,)


@pytest.mark.parametrize("extra", [[], ["1", "2"], ["-1"], ["two"], ["1.5"], [""], ["1_0"], ["\u0663"], [" 3"]])
def test_motionblur_bad_arguments(extra):
    with pytest.raises(UsageError):
        validate_filter_args("motionblur", extra)


def test_unknown_filter():
    with pytest.raises(UsageError):
        validate_filter_args("sharpen", [])


def test_greyscale_alias(make_image):
    img = make_image([[(10, 20, 30)]])
    apply_filter(img, "greyscale")
    assert img.pixels.tolist() == [[[20, 20, 20]]]


def test_apply_motionblur(make_image):
    img = make_image([[(10, 10, 10), (20, 20, 20), (30, 30, 30)]])
    apply_filter(img, "motionblur", ["2"])
    assert img.pixels[0, :, 0].tolist() == [15, 25, 30]


def test_apply_rejects_misuse_without_touching_image(make_image):
    img = make_image([[(10, 20, 30)]])
    with pytest.raises(UsageError):
        apply_filter(img, "invert", ["1"])
    assert img.pixels.tolist() == [[[10, 20, 30]]]
