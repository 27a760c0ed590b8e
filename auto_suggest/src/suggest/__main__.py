from __future__ import annotations
import argparse, json, logging
from .engine import Suggest
from .options import load_options, load_commands


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="suggest", description="Suggest CLI (weighted edit-distance autocorrect)")
    p.add_argument("--commands", nargs="+", default=[], help="Known commands to match against")
    p.add_argument("--commands-file", default=None, help="File with one command per line")
    p.add_argument("--options", default=None, help="JSON options file (costswap, costdeletion, ...)")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--repl", action="store_true", help="Interactive loop")
    p.add_argument("--exact", action="store_true", help="Case-insensitive exact lookup only")
    p.add_argument("--no-autocorrect", action="store_true", help="Only list matches, no autocorrect pick")
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    commands = list(args.commands)
    try:
        if args.commands_file:
            commands.extend(load_commands(args.commands_file))
        sug = Suggest(load_options(args.options) if args.options else None, commands)
    except (OSError, ValueError) as e:
        p.error(str(e))
    if not sug.commands:
        p.error("no commands given (use --commands or --commands-file)")
    if args.no_autocorrect:
        sug.options.autocorrect_disabled = True

    def run_query(q: str) -> bool:
        if args.exact:
            match = sug.exact_match(q)
            if args.json:
                print(json.dumps({"query": q, "match": match}, ensure_ascii=False))
            else:
                print(match or "(no match)")
            return bool(match)

        result = sug.query(q)
        if args.json:
            print(json.dumps({"query": q, **result.to_dict()}, ensure_ascii=False, indent=2))
        else:
            if not result.success:
                print("(no close matches)"); return False
            print("Similar matches:", ", ".join(result.matches))
            if result.autocorrect:
                print("Autocorrect:", result.autocorrect)
        return result.success

    ok = True
    if args.q is not None:
        ok = run_query(args.q)

    if args.repl:
        print("Type a command (empty line to exit).")
        while True:
            try:
                q = input("> ").strip()
            except (EOFError, KeyboardInterrupt):
                break
            if not q:
                break
            run_query(q)

    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
