"""``radian`` console command for quick angle arithmetic from a shell."""
import argparse
import logging

from .angle import Angle
from .config import RadianConfig
from .formatting import FORMATTERS
from .trig import TRIG_PROVIDERS

logger = logging.getLogger(__name__)


def _angle(value: float, degrees: bool) -> Angle:
    return Angle.from_degrees(value) if degrees else Angle(value)


def _run(args: argparse.Namespace):
    a = _angle(args.a, args.degrees)
    if args.command == "normalize":
        return a
    if args.command == "opposite":
        return a.opposite()
    if args.command == "vector":
        return a.to_unit_vector()
    b = _angle(args.b, args.degrees)
    if args.command == "difference":
        return a.difference(b)
    if args.command == "distance":
        return a.distance(b)
    if args.command == "midpoint":
        return a.midpoint(b)
    if args.command == "lerp":
        return a.lerp(b, args.t)
    raise ValueError(f"Unknown command: {args.command}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="radian", description="Normalized angle calculator")
    parser.add_argument("--degrees", action="store_true",
                        help="Interpret angle arguments as degrees instead of radians")
    parser.add_argument("--format", choices=sorted(FORMATTERS), default=None,
                        help="Output formatter (overrides the config file)")
    parser.add_argument("--backend", choices=sorted(TRIG_PROVIDERS), default=None,
                        help="Trigonometry provider (overrides the config file)")
    parser.add_argument("--config", default=None, help="Path to a JSON config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    for name in ("normalize", "opposite", "vector"):
        p = sub.add_parser(name)
        p.add_argument("a", type=float)
    for name in ("difference", "distance", "midpoint"):
        p = sub.add_parser(name)
        p.add_argument("a", type=float)
        p.add_argument("b", type=float)
    p = sub.add_parser("lerp")
    p.add_argument("a", type=float)
    p.add_argument("b", type=float)
    p.add_argument("t", type=float)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    config = RadianConfig(args.config)
    if args.backend:
        config.set("trig", "backend", args.backend)
    if args.format:
        config.set("format", "style", args.format)
    try:
        config.apply()
        formatter = config.formatter()
        result = _run(args)
    except KeyError as e:
        parser.error(e.args[0])
    except (ValueError, RuntimeError) as e:
        parser.error(str(e))

    if isinstance(result, Angle):
        print(formatter.format(result))
    else:
        print(" ".join(repr(v) for v in result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
