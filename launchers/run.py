import argparse
import logging
import sys
from pathlib import Path
import os
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = "hide"

import pygame

# Ensure repo root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bloom.anim.tween import EASINGS, get_easing
from bloom.api.config import EngineConfig
from bloom.api.params import ParameterStore
from bloom.app.loader import apply_animation, load_preset
from bloom.app.loop import run_visualizer
from bloom.common.logging import setup_default_logging

logger = logging.getLogger("bloom.launcher")


def parse_screen(value: str):
    try:
        w, h = map(int, value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WxH, got {value!r}") from None
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError(f"screen size must be positive, got {value!r}")
    return w, h


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Line Bloom - morphing radial line art")
    parser.add_argument("--screen", type=parse_screen, default=None,
                        help="Initial window size WxH, e.g. 1280x720")
    parser.add_argument("--preset", type=Path, default=None, help="Preset YAML file")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for repeatable geometry")
    parser.add_argument("--fps", type=int, default=None, help="Frame rate cap")
    parser.add_argument("--duration-ms", type=float, default=None, help="Length of one morph cycle")
    parser.add_argument("--easing", choices=sorted(EASINGS), default=None)
    parser.add_argument("--no-panel", action="store_true", help="Start with the control panel hidden")
    parser.add_argument("--frames", type=int, default=None, help="Exit after this many frames")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--complexity", type=int, default=None, help="Rotational repeats")
    parser.add_argument("--amplitude", type=float, default=None, help="Curve x scaling")
    parser.add_argument("--color1", default=None, help="Radial line colour")
    parser.add_argument("--color2", default=None, help="Long curve colour")
    parser.add_argument("--color3", default=None, help="Short curve colour")
    return parser


def configure(args) -> tuple:
    """Merge defaults, preset file and CLI flags (in that order) into (cfg, params)."""
    cfg = EngineConfig()
    params = ParameterStore()

    if args.preset is not None:
        preset_params, animation = load_preset(args.preset)
        params.update(preset_params)
        cfg = apply_animation(cfg, animation)

    if args.screen is not None:
        cfg.screen_size = args.screen
    if args.seed is not None:
        cfg.seed = args.seed
    if args.fps is not None:
        cfg.fps = args.fps
    if args.duration_ms is not None:
        cfg.duration_ms = args.duration_ms
    if args.easing is not None:
        cfg.easing = args.easing
    get_easing(cfg.easing)
    if args.no_panel:
        cfg.show_panel = False
    if args.frames is not None:
        cfg.max_frames = args.frames

    overrides = {
        "repeat_count": args.complexity,
        "amplitude": args.amplitude,
        "color1": args.color1,
        "color2": args.color2,
        "color3": args.color3,
    }
    params.update({k: v for k, v in overrides.items() if v is not None})
    return cfg, params


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_default_logging(args.log_level)

    try:
        cfg, params = configure(args)
    except (FileNotFoundError, ValueError) as e:
        parser.error(str(e))

    try:
        run_visualizer(cfg, params)
    except pygame.error as e:
        logger.error("display error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
