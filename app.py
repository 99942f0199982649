from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from flask import Flask, Response, jsonify, request

from game import (
    BoardEngine,
    MoveResult,
    parse_direction,
    parse_layout,
    replay_solution,
)
from stackgrid_core.config import load_settings
from stackgrid_core.logging_config import setup_logging

log = logging.getLogger("stackgrid.app")


def state_to_json(engine: BoardEngine) -> Dict[str, Any]:
    s = engine.describe_state()
    return {
        "grid": s["grid"],
        "circles": {tid: {"id": tid, "color": color} for tid, color in s["colors"].items()},
        "rows": s["rows"],
        "cols": s["cols"],
        "won": s["won"],
    }


def result_to_json(res: MoveResult) -> Dict[str, Any]:
    return {"success": bool(res.success), "reason": res.reason, "won": res.won}


def create_app(engine: Optional[BoardEngine] = None) -> Flask:
    app = Flask(__name__)
    app.config["ENGINE"] = engine if engine is not None else BoardEngine()

    def _engine() -> BoardEngine:
        return app.config["ENGINE"]

    @app.get("/api/state")
    def api_state() -> Any:
        return jsonify({"ok": True, "state": state_to_json(_engine())})

    @app.post("/api/reset")
    def api_reset() -> Any:
        body = request.get_json(force=True, silent=True) or {}
        if not isinstance(body, dict):
            body = {}
        eng = _engine()
        layout_in = body.get("layout")
        if layout_in is None:
            eng.reset()
        else:
            try:
                eng.initialize(parse_layout(layout_in))
            except (KeyError, TypeError, ValueError) as e:
                return jsonify({"ok": False, "error": f"bad layout: {e}"}), 400
        return jsonify({"ok": True, "state": state_to_json(eng)})

    @app.post("/api/move")
    def api_move() -> Any:
        body = request.get_json(force=True, silent=True) or {}
        if not isinstance(body, dict):
            return jsonify({"ok": False, "error": "JSON object body required"}), 400
        circle_id = body.get("circleId")
        direction_in = body.get("direction")
        if not circle_id or not direction_in:
            return jsonify({"ok": False, "error": "Missing circleId or direction"}), 400
        try:
            direction = parse_direction(direction_in)
        except ValueError as e:
            return jsonify({"ok": False, "error": str(e)}), 400
        eng = _engine()
        res = eng.move(str(circle_id), direction)
        return jsonify({"ok": True, "result": result_to_json(res), "state": state_to_json(eng)})

    @app.get("/api/legal")
    def api_legal() -> Any:
        moves = [{"circleId": tid, "direction": d} for tid, d in _engine().legal_moves()]
        return jsonify({"ok": True, "legalMoves": moves})

    @app.post("/api/solve")
    def api_solve() -> Any:
        eng = _engine()
        played = replay_solution(eng)
        steps = [
            {"circleId": mv[0], "direction": mv[1], "result": result_to_json(res)}
            for mv, res in played
        ]
        return jsonify({"ok": True, "steps": steps, "state": state_to_json(eng)})

    @app.get("/api/history/csv")
    def api_history_csv() -> Any:
        resp = Response(_engine().history_csv(), mimetype="text/csv")
        resp.headers["Content-Disposition"] = 'attachment; filename="movement_history.csv"'
        return resp

    return app


app = create_app()


# Entrypoint for "python app.py"
if __name__ == "__main__":
    settings = load_settings()
    setup_logging(settings.log_level)
    log.info("serving on %s:%d", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
