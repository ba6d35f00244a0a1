"""Command line interface for the Blueprint Playground."""
from __future__ import annotations

import argparse
import json
from typing import Iterable, List, Tuple

from .config import EditorConfig, load_config
from .geometry import Point, total_length
from .session import EditorState, display_to_dict, render

Stroke = Tuple[Point, Point]


def parse_point(text: str) -> Point:
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError(f"Point '{text}' must be written as x,y")
    return Point(float(parts[0]), float(parts[1]))


def parse_stroke(text: str) -> Stroke:
    """Parse ``x0,y0:x1,y1`` into a press point and a release point."""
    head, sep, tail = text.partition(":")
    if not sep:
        raise ValueError(f"Stroke '{text}' must be written as x0,y0:x1,y1")
    return parse_point(head), parse_point(tail)


def _config_from_args(args: argparse.Namespace) -> EditorConfig:
    config = load_config(args.config)
    return config.updated(grid_pitch=args.grid, thickness=args.thickness)


def replay(strokes: Iterable[Stroke], config: EditorConfig, undo_steps: int = 0) -> EditorState:
    """Drive an editor with press/move/release for each stroke."""
    state = EditorState(config=config)
    for press, release in strokes:
        state.begin_drag(press)
        state.move_drag(release)
        state.end_drag()
    for _ in range(undo_steps):
        state.undo()
    return state


def _cmd_gui(args: argparse.Namespace) -> None:  # pragma: no cover - GUI entry point
    from .app import main as run_app

    run_app(_config_from_args(args))


def _cmd_replay(args: argparse.Namespace) -> None:
    strokes: List[Stroke] = [parse_stroke(item) for item in args.stroke or []]
    state = replay(strokes, _config_from_args(args), undo_steps=args.undo)
    model = render(state)
    if args.json:
        print(json.dumps(display_to_dict(model), indent=2))
        return
    print(f"Walls ({len(model.segments)}), total length {total_length(model.segments):.2f}:")
    for idx, wall in enumerate(model.segments):
        print(
            f"  {idx}: ({wall.start.x:g}, {wall.start.y:g}) -> ({wall.end.x:g}, {wall.end.y:g})"
            f" thickness={wall.thickness:g}"
        )
    print(f"History step {state.history.cursor} of {len(state.history) - 1}")


def _add_config_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", help="Path to a JSON editor config")
    parser.add_argument("--grid", type=float, help="Grid pitch override")
    parser.add_argument("--thickness", type=float, help="Wall thickness override")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blueprint",
        description="Blueprint Playground command line interface",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    gui = sub.add_parser("gui", help="Launch the desktop drawing tool")
    _add_config_args(gui)
    gui.set_defaults(func=_cmd_gui)

    replayer = sub.add_parser("replay", help="Draw scripted strokes headlessly and print the walls")
    _add_config_args(replayer)
    replayer.add_argument(
        "--stroke",
        action="append",
        help="Press and release points as x0,y0:x1,y1 (repeatable)",
    )
    replayer.add_argument("--undo", type=int, default=0, help="Undo steps to apply after drawing")
    replayer.add_argument("--json", action="store_true", help="Print the full display model as JSON")
    replayer.set_defaults(func=_cmd_replay)

    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except ValueError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
