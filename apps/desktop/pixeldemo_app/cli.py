"""CLI entrypoints for the PixelDemo window, frame snapshots and diagnostics."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from pixeldemo_core import FrameLoop, ScreenId, build_doctor_payload, load_config
from pixeldemo_core.logging_setup import configure_logging


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _load(args: argparse.Namespace):
    return load_config(Path(args.config).expanduser() if args.config else None)


def cmd_run(args: argparse.Namespace) -> int:
    from .app import run_gui

    return run_gui(_load(args))


def cmd_snapshot(args: argparse.Namespace) -> int:
    cfg = _load(args)
    loop = FrameLoop(cfg.window.width, cfg.window.height)
    loop.state.screen = ScreenId(args.screen)
    loop.state.phase = args.phase % 255
    loop.render()

    out = Path(args.out).expanduser().resolve()
    out.parent.mkdir(parents=True, exist_ok=True)
    loop.buffer.to_image().save(out, format="PNG")

    _print_json(
        {
            "success": True,
            "screen": loop.state.screen.value,
            "phase": loop.state.phase,
            "width": loop.buffer.width,
            "height": loop.buffer.height,
            "out": str(out),
        }
    )
    return 0


def cmd_doctor(args: argparse.Namespace) -> int:
    _print_json(build_doctor_payload(_load(args)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pixeldemo", description="Pixel buffer demo window and tools")
    parser.add_argument("--config", default=None, help="Optional path to a settings JSON file")
    sub = parser.add_subparsers(dest="command", required=True)

    run_cmd = sub.add_parser("run", help="Open the demo window")
    run_cmd.set_defaults(func=cmd_run)

    snap_cmd = sub.add_parser("snapshot", help="Render a single frame to PNG without opening a window")
    snap_cmd.add_argument("--screen", choices=[s.value for s in ScreenId], default=ScreenId.MAIN.value)
    snap_cmd.add_argument("--phase", type=int, default=0, help="Animation phase for the exit button")
    snap_cmd.add_argument("--out", required=True, help="Output PNG path")
    snap_cmd.set_defaults(func=cmd_snapshot)

    doctor_cmd = sub.add_parser("doctor", help="Print environment and settings diagnostics")
    doctor_cmd.set_defaults(func=cmd_doctor)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command != "run":
        configure_logging(console=False)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
