from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify
from suggest import Suggest
from suggest.options import load_options, load_commands
from suggest import config as CFG

log = logging.getLogger(__name__)

app = Flask(__name__)
_engine: Suggest = Suggest(commands=CFG.DEFAULT_COMMANDS)


def _match_response(status: int, *, changed: bool = False, match: str = "", error: str = ""):
    # empty match/error are left out of the body
    body: dict = {"changed": changed}
    if match:
        body["match"] = match
    if error:
        body["error"] = error
    return jsonify(body), status


# ---------- API ----------
@app.route("/match", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
def match():
    if request.method != "GET":
        return "", 404, {"content-type": "application/json"}
    q = request.args.get("q", "", type=str)
    if not q:
        return _match_response(400, error="Must supply query parameter 'q' in URL.")

    found = _engine.autocorrect(q)
    if not found:
        log.info("no match for %r", q)
        return _match_response(404, error="No match was found")
    return _match_response(200, changed=found != q, match=found)


@app.get("/api/query")
def api_query():
    q = request.args.get("q", "", type=str)
    if not q:
        return jsonify({"autocorrect": "", "matches": []})
    return jsonify(_engine.query(q).to_dict())


@app.get("/health")
def health():
    return jsonify({"ok": True, "commands": len(_engine.commands)})


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Serve the suggest engine over HTTP")
    ap.add_argument("--commands", nargs="+", default=None)
    ap.add_argument("--commands-file", default=None)
    ap.add_argument("--options", default=None)  # JSON file, see suggest.options
    ap.add_argument("--host", default=CFG.DEFAULT_HOST)
    ap.add_argument("--port", type=int, default=CFG.DEFAULT_PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    commands = list(args.commands or [])
    try:
        if args.commands_file:
            commands.extend(load_commands(args.commands_file))
        options = load_options(args.options) if args.options else None
    except (OSError, ValueError) as e:
        ap.error(str(e))

    global _engine
    _engine = Suggest(options, commands or CFG.DEFAULT_COMMANDS)
    log.info("Listening on %s:%d (%d commands)", args.host, args.port, len(_engine.commands))
    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
