"""Burrow CLI entry point.

Provides subcommands for generating dungeon maps to PNG/ASCII and for running
the HTTP API server. Accepts configuration via flags and BURROW_* environment
variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import os
import signal
import sys
from pathlib import Path
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

from burrow import __version__

_color_init()

# Disable colors if output is not a real terminal (e.g., during pytest capture)
_COLOR_ENABLED = sys.stdout.isatty()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Burrow dungeon generator

    Generate tiled multi-area dungeon maps as PNG images (or text), or run
    the HTTP API that serves them. Generation settings can be provided via
    CLI flags or BURROW_* environment variables; CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          BURROW_ROW_COUNT        Grid rows areas are spread across (default: 2)
          BURROW_AREA_COUNT       Number of areas (default: 6)
          BURROW_ROOM_GENERATOR   chamber | grow | grow_separated | mixed (default: grow)
          BURROW_TUNNELER         l_shape | weighted (default: weighted)
          BURROW_CONNECTION       basic | secondary (default: secondary)
          BURROW_LOG_LEVEL        debug | info | warn | error (default: info)
          HOST / PORT             Bind address for the API server

        Examples:
          # Twelve maps into ./out
          python run.py generate --count 12 --out out

          # One reproducible map printed as text
          python run.py generate --seed 42 --ascii

          # Serve the API on a custom port
          python run.py server --port 8080
        """
    )

    parser = argparse.ArgumentParser(
        prog="Burrow",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Burrow Dungeon Generator {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate dungeon maps",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate one or more dungeon maps and write them as PNG files (or print ASCII)",
    )
    gen_parser.add_argument("--count", type=int, default=1, help="Number of maps to generate (default: 1)")
    gen_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed of the first map; map i uses seed+i (default: random)",
    )
    gen_parser.add_argument("--out", default=".", help="Output directory for img_<i>.png files (default: .)")
    gen_parser.add_argument("--scale", type=int, default=4, help="Pixels per tile (default: 4)")
    gen_parser.add_argument("--ascii", action="store_true", help="Print maps as text instead of writing PNGs")
    gen_parser.add_argument("--rows", dest="row_count", type=int, default=None, help="Grid rows")
    gen_parser.add_argument("--areas", dest="area_count", type=int, default=None, help="Number of areas")
    gen_parser.add_argument("--generator", dest="room_generator", default=None, help="Room generator variant")
    gen_parser.add_argument("--tunneler", default=None, help="Tunneler variant")
    gen_parser.add_argument("--connection", default=None, help="Connection strategy variant")
    gen_parser.set_defaults(command="generate")

    server_parser = subparsers.add_parser(
        "server",
        help="Run the HTTP API server",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the Flask dungeon API",
    )
    server_parser.add_argument(
        "--host",
        default=None,
        help="Host interface to bind (default: env HOST or 0.0.0.0)",
    )
    server_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: env PORT or 5000)",
    )
    server_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable Flask debug mode with verbose error pages",
    )
    server_parser.set_defaults(command="server")

    # If no subcommand provided, default to a single generated map
    if len(argv) == 0:
        argv = ["generate"]

    return parser.parse_args(argv)


def _label(text: str) -> str:
    return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text


def _value(val) -> str:
    return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)


def _banner(title: str, rows: list[tuple[str, object]]) -> str:
    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    heading = f"{Fore.CYAN}{Style.BRIGHT}{title}{Style.RESET_ALL}" if _COLOR_ENABLED else title
    lines = [divider, f"  {heading}", divider]
    lines += [f"  {_label(k + ':'):12} {_value(v)}" for k, v in rows]
    lines += [divider, ""]
    return "\n".join(lines)


def run_generate(args: argparse.Namespace) -> int:
    from burrow.dungeon import DungeonConfig, RoomPlacementError, generate_dungeon
    from burrow.logging_utils import log
    from burrow.render import save_png

    overrides = {
        k: getattr(args, k)
        for k in ("row_count", "area_count", "room_generator", "tunneler", "connection")
        if getattr(args, k) is not None
    }
    try:
        base = DungeonConfig.from_env(**overrides).validate()
    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2
    if args.count < 1:
        print("[ERROR] --count must be >= 1", file=sys.stderr)
        return 2
    if args.scale < 1:
        print("[ERROR] --scale must be >= 1", file=sys.stderr)
        return 2

    out_dir = Path(args.out)
    for i in range(args.count):
        seed = None if args.seed is None else args.seed + i
        cfg = DungeonConfig.from_mapping({"seed": seed}, base=base)
        try:
            dungeon = generate_dungeon(cfg)
        except RoomPlacementError as e:
            log.error(event="generate_failed", index=i, error=str(e))
            print(f"[ERROR] map {i}: {e}", file=sys.stderr)
            return 1
        if args.ascii:
            print(f"# seed={dungeon.seed}")
            print(dungeon.to_ascii())
            print()
        else:
            path = save_png(dungeon.tiles, out_dir / f"img_{i}.png", scale=args.scale)
            print(f"[INFO] wrote {path} (seed={dungeon.seed}, tiles={len(dungeon.tiles)})")
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "generate").lower()
    if mode == "generate":
        return run_generate(args)

    host = getattr(args, "host", None) or os.getenv("HOST", "0.0.0.0")
    port = int(getattr(args, "port", None) or os.getenv("PORT", "5000"))

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    # Import server entrypoint only after environment is ready
    from burrow import server
    from burrow.logging_utils import log

    print(
        _banner(
            "Burrow Dungeon API",
            [("Mode", mode.upper()), ("Host", host), ("Port", port), ("Debug", "YES" if args.debug else "NO")],
        )
    )
    log.info(event="startup", mode=mode, host=host, port=port)
    server.start_server(host=host, port=port, debug=args.debug)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
