# SPDX-License-Identifier: AGPL-3.0-only
import argparse
import json
import sys
from pathlib import Path

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from .config import Config
from .errors import StyleTypeError
from .merge import merge
from .strings import escape, quote, url
from .tree import is_style

STRING_HELPERS = {
    "escape": escape,
    "quote": quote,
    "url": url,
}


def _read_text(path_or_dash):
    if path_or_dash == "-":
        return sys.stdin.read()
    return Path(path_or_dash).read_text(encoding="utf-8")


def load_style_file(path_or_dash):
    """Load a style mapping from a JSON or TOML file (`-` reads JSON from stdin)."""
    text = _read_text(path_or_dash)
    if path_or_dash != "-" and Path(path_or_dash).suffix.lower() == ".toml":
        data = tomllib.loads(text)
    else:
        data = json.loads(text)
    if not is_style(data):
        raise StyleTypeError(f"{path_or_dash}: top-level value must be an object, got {type(data).__name__}")
    return data


def _load_config(args):
    config_path = getattr(args, "config", None)
    return Config.load(Path(config_path) if config_path else None)


def cmd_string(args):
    helper = STRING_HELPERS[args.command]
    value = helper(args.text)
    if args.json:
        result = {
            "schema": "stylehelper.string.v1",
            "ok": True,
            "helper": args.command,
            "value": value,
        }
        sys.stdout.write(json.dumps(result, ensure_ascii=True) + "\n")
    else:
        sys.stdout.write(value + "\n")


def run_merge(inputs, out=None, indent=None):
    """Merge style files left to right; write JSON to `out` (or return it)."""
    merged = merge(*(load_style_file(path) for path in inputs))
    text = json.dumps(merged, indent=indent, ensure_ascii=False)
    if out and out != "-":
        out_path = Path(out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text + "\n", encoding="utf-8")
    return merged, text


def cmd_merge(args):
    config = _load_config(args)
    indent = args.indent if args.indent is not None else config.get_indent()
    merged, text = run_merge(args.inputs, out=args.out, indent=indent)
    to_stdout = not args.out or args.out == "-"

    if args.json:
        result = {
            "schema": "stylehelper.merge.v1",
            "ok": True,
            "inputs": list(args.inputs),
            "output": None if to_stdout else str(Path(args.out)),
            "style": merged,
        }
        sys.stdout.write(json.dumps(result, ensure_ascii=True) + "\n")
    elif to_stdout:
        sys.stdout.write(text + "\n")
    else:
        sys.stdout.write(f"[ok] merged {len(args.inputs)} files -> {args.out}\n")


def _add_merge_flags(p):
    p.add_argument("inputs", nargs="+", help="JSON or TOML style files, merged left to right")
    p.add_argument("--indent", type=int, help="JSON indent (overrides config)")
    p.add_argument("--config", help="Path to stylehelper.toml")


def _build_parser():
    parser = argparse.ArgumentParser(prog="stylehelper")
    parser.add_argument("--json", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    # ===== String helpers =====
    for name, helper in STRING_HELPERS.items():
        p_helper = sub.add_parser(name, help=helper.__doc__.strip().splitlines()[0] if helper.__doc__ else None)
        p_helper.add_argument("text")
        p_helper.set_defaults(func=cmd_string)

    # ===== Style merging =====
    from . import watcher as watcher_module

    p_merge = sub.add_parser("merge", help="Deep-merge style files into one JSON style")
    _add_merge_flags(p_merge)
    p_merge.add_argument("--out", help="Output path (default: stdout)")
    p_merge.set_defaults(func=cmd_merge)

    p_watch = sub.add_parser("watch", help="Re-run merge whenever an input file changes")
    _add_merge_flags(p_watch)
    p_watch.add_argument("--out", required=True, help="Output path")
    p_watch.add_argument("--delay", type=float, default=0.5, help="Debounce delay in seconds")
    p_watch.set_defaults(func=watcher_module.cmd_watch)

    return parser


def main(argv=None):
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except Exception as exc:
        if args.json:
            err = {
                "schema": "stylehelper.error.v1",
                "ok": False,
                "code": "CLI_ERROR",
                "message": str(exc),
            }
            sys.stdout.write(json.dumps(err, ensure_ascii=True) + "\n")
        else:
            sys.stderr.write(f"[error] {exc}\n")
        return 3
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
