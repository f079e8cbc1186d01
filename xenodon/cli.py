"""Options of the ``render`` subcommand and their validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from xenodon.arg_parse import (
    Command,
    Flag,
    Parameter,
    Positional,
    float_range_opt,
    int_range_opt,
    parse,
    parse_float,
    path_opt,
    string_opt,
)
from xenodon.errors import Error

DEFAULT_HEADLESS_OUTPUT = "out-{}.png"


@dataclass
class RenderParameters:
    """Parameters handed to the renderer."""

    volume_path: Path | None = None
    emission_coeff: float | None = None
    volume_type_override: str | None = None
    shader: str | None = None
    voxel_ratio: tuple[float, float, float] | None = None
    stats_save_path: Path | None = None
    camera: str | None = None
    repeat: int | None = None


@dataclass
class HeadlessOptions:
    config: Path | None = None
    output: str = ""
    discard_output: bool = False

    @property
    def enabled(self):
        return self.config is not None


@dataclass
class DirectOptions:
    config: Path | None = None

    @property
    def enabled(self):
        return self.config is not None


@dataclass
class XorgOptions:
    enabled: bool = False
    multi_gpu_config: Path | None = None


@dataclass
class RenderOptions:
    quiet: bool = False
    log_output: Path | None = None
    render_params: RenderParameters = field(default_factory=RenderParameters)
    headless: HeadlessOptions = field(default_factory=HeadlessOptions)
    direct: DirectOptions = field(default_factory=DirectOptions)
    xorg: XorgOptions = field(default_factory=XorgOptions)


def parse_voxel_ratio(arg):
    """Parse ``x:y:z`` with all three components positive.

    Raises ``ValueError`` if the text is not a valid ratio.
    """
    parts = arg.split(":", 2)
    if len(parts) != 3 or not all(parts):
        raise ValueError(f"invalid voxel ratio: {arg!r}")
    value = tuple(parse_float(part) for part in parts)
    if not all(component > 0 for component in value):
        raise ValueError(f"voxel ratio components must be positive: {arg!r}")
    return value


_RENDER_COMMAND_FLAGS = (
    ("quiet", "--quiet", "q"),
    ("xorg", "--xorg", None),
    ("discard_output", "--discard-output", None),
)


def _render_command():
    return Command(
        flags=[Flag(dest, long_arg, short) for dest, long_arg, short in _RENDER_COMMAND_FLAGS],
        parameters=[
            Parameter("log_output", path_opt(), "output path", "--log-output"),
            Parameter("headless", path_opt(), "config path", "--headless"),
            Parameter("output", string_opt(), "output path", "--output"),
            Parameter("direct", path_opt(), "config path", "--direct"),
            Parameter("xorg_multi_gpu", path_opt(), "config path", "--xorg-multi-gpu"),
            Parameter("emission_coeff", float_range_opt(0.0), "emission coefficient", "--emission-coeff", "e"),
            Parameter("volume_type", string_opt(), "volume type", "--volume-type"),
            Parameter("shader", string_opt(), "shader", "--shader", "s"),
            Parameter("voxel_ratio", parse_voxel_ratio, "voxel dimension ratio", "--voxel-ratio", "r"),
            Parameter("stats_output", path_opt(), "stats output", "--stats-output"),
            Parameter("camera", string_opt(), "camera", "--camera"),
            Parameter("repeat", int_range_opt(), "frame repeat", "--repeat"),
        ],
        positional=[Positional("volume_path", path_opt(), "volume path")],
    )


def parse_render_args(args):
    """Parse and validate the arguments of ``render``; raises ``Error`` on misuse."""
    values = parse(args, _render_command())

    opts = RenderOptions(
        quiet=values["quiet"],
        log_output=values.get("log_output"),
        render_params=RenderParameters(
            volume_path=values["volume_path"],
            emission_coeff=values.get("emission_coeff"),
            volume_type_override=values.get("volume_type"),
            shader=values.get("shader"),
            voxel_ratio=values.get("voxel_ratio"),
            stats_save_path=values.get("stats_output"),
            camera=values.get("camera"),
            repeat=values.get("repeat"),
        ),
        headless=HeadlessOptions(
            config=values.get("headless"),
            output=values.get("output", ""),
            discard_output=values["discard_output"],
        ),
        direct=DirectOptions(config=values.get("direct")),
        xorg=XorgOptions(enabled=values["xorg"], multi_gpu_config=values.get("xorg_multi_gpu")),
    )

    enabled_backends = sum((opts.xorg.enabled, opts.headless.enabled, opts.direct.enabled))
    if enabled_backends == 0:
        raise Error("Missing required backend --xorg, --headless or --direct")
    if enabled_backends > 1:
        raise Error("--xorg, --headless and --direct are mutually exclusive")

    if not opts.headless.enabled and opts.headless.discard_output:
        raise Error("--dont-save requires --headless")

    if opts.headless.output and not opts.headless.enabled:
        raise Error("--output requires --headless")
    if not opts.headless.output:
        opts.headless.output = DEFAULT_HEADLESS_OUTPUT
    elif opts.headless.discard_output:
        raise Error("--dont-save and --output are mutually exclusive")

    if opts.xorg.multi_gpu_config is not None and not opts.xorg.enabled:
        raise Error("--xorg-multi-gpu requires --xorg")

    return opts