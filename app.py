from __future__ import annotations

import logging
import math
import os
from typing import Any, Dict, List, Tuple

from flask import Flask, jsonify, request

from game import (
    Coord,
    GameOverError,
    GameState,
    Grid,
    apply_toggle,
    new_game,
    parse_coord_key,
)

logger = logging.getLogger(__name__)

DEFAULT_ROWS = int(os.getenv("LIGHTSOUT_ROWS", "3"))
DEFAULT_COLS = int(os.getenv("LIGHTSOUT_COLS", "3"))
DEFAULT_CHANCE = float(os.getenv("LIGHTSOUT_CHANCE", "0.5"))

WIN_MESSAGE = "You won!"

app = Flask(__name__)


def state_to_json(s: GameState) -> Dict[str, Any]:
    return {
        "rows": int(s.grid.rows),
        "cols": int(s.grid.cols),
        "board": s.grid.rows_as_lists(),
        "moves": int(s.moves),
        "won": s.is_won,
    }


def json_to_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    raise ValueError(f"{name} must be an integer")


def json_to_state(obj: Dict[str, Any]) -> GameState:
    board = obj["board"]
    if not isinstance(board, list) or not all(isinstance(row, list) for row in board):
        raise ValueError("board must be an array of arrays")
    if not all(isinstance(cell, bool) for row in board for cell in row):
        raise ValueError("board cells must be true/false")
    grid = Grid.from_rows(board)
    if "rows" in obj and json_to_int(obj["rows"], "rows") != grid.rows:
        raise ValueError("rows does not match board")
    if "cols" in obj and json_to_int(obj["cols"], "cols") != grid.cols:
        raise ValueError("cols does not match board")
    moves = json_to_int(obj.get("moves", 0), "moves")
    if moves < 0:
        raise ValueError("moves must be non-negative")
    return GameState(grid=grid, moves=moves)


def json_to_coord(raw: Any) -> Coord:
    if isinstance(raw, str):
        return parse_coord_key(raw)
    if isinstance(raw, (list, tuple)) and len(raw) == 2:
        r, c = raw
        if isinstance(r, bool) or isinstance(c, bool) or not isinstance(r, int) or not isinstance(c, int):
            raise ValueError("coord components must be integers")
        return (r, c)
    raise ValueError("coord must be [row, col] or 'row-col'")


def _flipped(before: Grid, after: Grid) -> List[List[int]]:
    return [[r, c] for (r, c) in before.coords() if before.at(r, c) != after.at(r, c)]


def _error(message: str, status: int) -> Tuple[Any, int]:
    return jsonify({"ok": False, "error": message}), status


@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True)
    if body is None:
        body = {}
    if not isinstance(body, dict):
        return _error("body must be a JSON object", 400)
    try:
        rows = json_to_int(body.get("rows", DEFAULT_ROWS), "rows")
        cols = json_to_int(body.get("cols", DEFAULT_COLS), "cols")
        chance = float(body.get("chance", DEFAULT_CHANCE))
        seed = body.get("seed", None)
        if seed is not None:
            seed = json_to_int(seed, "seed")
        state = new_game(rows, cols, chance, seed=seed)
    except (TypeError, ValueError) as e:
        return _error(f"bad parameters: {e}", 400)
    logger.debug("api_new rows=%d cols=%d chance=%s seed=%s", rows, cols, chance, seed)
    return jsonify({"ok": True, "state": state_to_json(state)})


@app.post("/api/toggle")
def api_toggle() -> Any:
    body = request.get_json(force=True, silent=True)
    if body is None:
        body = {}
    if not isinstance(body, dict):
        return _error("body must be a JSON object", 400)
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        return _error("state required", 400)
    if "coord" not in body:
        return _error("coord required", 400)
    try:
        state = json_to_state(s_in)
    except (KeyError, TypeError, ValueError) as e:
        return _error(f"bad state: {e}", 400)
    try:
        coord = json_to_coord(body["coord"])
    except ValueError as e:
        return _error(f"bad coord: {e}", 400)
    try:
        next_state = apply_toggle(state, coord)
    except GameOverError as e:
        return _error(str(e), 409)
    return jsonify({
        "ok": True,
        "state": state_to_json(next_state),
        "flipped": _flipped(state.grid, next_state.grid),
    })


@app.post("/api/status")
def api_status() -> Any:
    body = request.get_json(force=True, silent=True)
    if body is None:
        body = {}
    if not isinstance(body, dict):
        return _error("body must be a JSON object", 400)
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        return _error("state required", 400)
    try:
        state = json_to_state(s_in)
    except (KeyError, TypeError, ValueError) as e:
        return _error(f"bad state: {e}", 400)
    return jsonify({
        "ok": True,
        "won": state.is_won,
        "litCount": state.grid.lit_count(),
        "message": WIN_MESSAGE if state.is_won else None,
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    logging.basicConfig(level=os.getenv("LIGHTSOUT_LOG_LEVEL", "INFO").upper())
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
