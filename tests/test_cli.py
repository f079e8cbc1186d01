from pathlib import Path

import pytest

from xenodon.arg_parse import ArgParseError
from xenodon.cli import parse_render_args, parse_voxel_ratio
from xenodon.errors import Error


def test_voxel_ratio_valid():
    assert parse_voxel_ratio("1:2.5:3") == (1.0, 2.5, 3.0)


@pytest.mark.parametrize("text", ["1:2", "1::3", ":1:1", "1:1:", "0:1:1", "1:-1:1", "1:2:3:4", "a:1:1"])
def test_voxel_ratio_invalid(text):
    with pytest.raises(ValueError):
        parse_voxel_ratio(text)


def test_headless_defaults():
    opts = parse_render_args(["--headless", "cfg.txt", "vol.tiff"])
    assert opts.headless.enabled
    assert opts.headless.config == Path("cfg.txt")
    assert opts.headless.output == "out-{}.png"
    assert opts.render_params.volume_path == Path("vol.tiff")
    assert not opts.xorg.enabled
    assert not opts.direct.enabled
    assert opts.quiet is False


def test_render_parameters_are_collected():
    opts = parse_render_args(
        ["-q", "--xorg", "-r", "1:2:3", "-s", "shade", "--repeat", "4", "-e", "0.5", "--camera", "cam", "v"]
    )
    assert opts.quiet is True
    assert opts.xorg.enabled
    params = opts.render_params
    assert params.voxel_ratio == (1.0, 2.0, 3.0)
    assert params.shader == "shade"
    assert params.repeat == 4
    assert params.emission_coeff == 0.5
    assert params.camera == "cam"


def test_missing_backend():
    with pytest.raises(Error) as exc:
        parse_render_args(["vol"])
    assert str(exc.value) == "Missing required backend --xorg, --headless or --direct"


def test_backends_mutually_exclusive():
    with pytest.raises(Error) as exc:
        parse_render_args(["--xorg", "--direct", "d.cfg", "vol"])
    assert str(exc.value) == "--xorg, --headless and --direct are mutually exclusive"


def test_discard_requires_headless():
    with pytest.raises(Error) as exc:
        parse_render_args(["--xorg", "--discard-output", "vol"])
    assert str(exc.value) == "--dont-save requires --headless"


def test_output_requires_headless():
    with pytest.raises(Error) as exc:
        parse_render_args(["--xorg", "--output", "x.png", "vol"])
    assert str(exc.value) == "--output requires --headless"


def test_discard_and_output_exclusive():
    with pytest.raises(Error) as exc:
        parse_render_args(["--headless", "h", "--discard-output", "--output", "x.png", "vol"])
    assert str(exc.value) == "--dont-save and --output are mutually exclusive"


def test_custom_output_kept():
    opts = parse_render_args(["--headless", "h", "--output", "frame-{}.png", "vol"])
    assert opts.headless.output == "frame-{}.png"


def test_multi_gpu_requires_xorg():
    with pytest.raises(Error) as exc:
        parse_render_args(["--direct", "d", "--xorg-multi-gpu", "m", "vol"])
    assert str(exc.value) == "--xorg-multi-gpu requires --xorg"


def test_negative_emission_rejected():
    with pytest.raises(ArgParseError) as exc:
        parse_render_args(["--xorg", "-e", "-1", "vol"])
    assert str(exc.value) == "Invalid value for <emission coefficient> of parameter -e"


def test_bad_voxel_ratio_rejected():
    with pytest.raises(ArgParseError) as exc:
        parse_render_args(["--xorg", "--voxel-ratio", "1:0:1", "vol"])
    assert str(exc.value) == "Invalid value for <voxel dimension ratio> of parameter --voxel-ratio"