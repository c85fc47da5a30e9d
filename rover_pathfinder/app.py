# app.py — Slim Flask API over the terrain maze solver
# deps: pip install flask numpy

from __future__ import annotations
from typing import Any, Dict, List, Tuple
import base64, binascii, logging
from flask import Flask, request, jsonify

from rover_pathfinder.config import SNAP_MAX_RADIUS
from rover_pathfinder.connectivity import nearest_unblocked
from rover_pathfinder.errors import InvalidInputError, PathfinderError
from rover_pathfinder.grid import check_cell
from rover_pathfinder.log import setup_logging
from rover_pathfinder.maze import make_maze

logger = logging.getLogger(__name__)

# region Request Parsing
def _decode_layer(value: Any, name: str):
    """Layers arrive as JSON int lists or base64 strings of raw bytes."""
    if isinstance(value, str):
        try:
            return base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError):
            raise InvalidInputError(f"{name} is not valid base64") from None
    if isinstance(value, list):
        return value
    raise InvalidInputError(f"{name} must be a list of bytes or a base64 string")


def _parse_flag(data: Dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise InvalidInputError(f"{key} must be a JSON boolean, got {value!r}")
    return value


def _parse_positions(data: Dict[str, Any]) -> List[Tuple[int, int]]:
    pts = data.get("positions") or []
    if not isinstance(pts, list) or len(pts) < 2:
        raise InvalidInputError("positions must have at least 2 points")
    out = []
    for p in pts:
        if isinstance(p, dict):
            p = (p.get("x"), p.get("y"))
        out.append(p)
    return out
# endregion


def create_app() -> Flask:
    app = Flask(__name__)

    # ======= CORS =======
    @app.after_request
    def _cors(resp):
        resp.headers["Access-Control-Allow-Origin"] = "*"
        resp.headers["Access-Control-Allow-Headers"] = "*"
        resp.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
        return resp

    @app.errorhandler(PathfinderError)
    def _bad_input(e):
        return jsonify({"error": str(e)}), 400

    @app.route("/", methods=["GET"])
    def root():
        return {"ok": True, "solve": "/maze/solve (POST JSON)"}

    @app.route("/maze/solve", methods=["POST"])
    def maze_solve():
        """
        JSON body:
        {
          "side": 4,
          "elevation": [...] | "<base64>",   // side*side bytes, row-major, 0 = no data
          "overrides": [...] | "<base64>",   // same layout, bitmask bytes
          "positions": [[x, y], ...],        // >= 2
          "diagonal": true,
          "snap": false                      // move blocked endpoints to nearest open cell
        }
        """
        data = request.get_json(force=True, silent=True)
        if not isinstance(data, dict):
            raise InvalidInputError("request body must be a JSON object")

        side = data.get("side")
        diagonal = _parse_flag(data, "diagonal", True)
        snap = _parse_flag(data, "snap", False)
        elevation = _decode_layer(data.get("elevation"), "elevation")
        overrides = _decode_layer(data.get("overrides"), "overrides")
        pts = _parse_positions(data)

        maze = make_maze(side, overrides, elevation, diagonal=diagonal)

        # Validate waypoints, optionally snapping blocked ones
        way: List[Tuple[int, int]] = []
        blocked_flags: List[bool] = []
        for i, p in enumerate(pts):
            cell = check_cell(p, maze.side, f"positions[{i}]")
            was_blocked = maze.has_barrier(cell)
            if snap:
                cell = nearest_unblocked(cell, maze.barriers, maze.side, max_radius=SNAP_MAX_RADIUS)
            blocked_flags.append(was_blocked)
            way.append(cell)

        # Run A* per leg
        path: List[Tuple[int, int]] = []
        legs_time: List[float] = []
        for i, leg in enumerate(maze.solve_legs(way)):
            if not leg.solved:
                logger.info(f"Leg {i+1} {way[i]} -> {way[i+1]} unsolved")
                diag = {
                    "leg": i + 1, "side": maze.side, "diagonal": diagonal,
                    "barrier_count": maze.barrier_count,
                    "blocked_ratio": maze.barrier_count / float(maze.side * maze.side),
                    "start_blocked_clicked": blocked_flags[i],
                    "end_blocked_clicked": blocked_flags[i + 1],
                    "expansions": leg.expansions,
                }
                return jsonify({"solved": False, "error": f"No path for leg {i+1}.", "diag": diag}), 200
            leg_path = list(leg.path)
            if i > 0:
                leg_path = leg_path[1:]
            path.extend(leg_path)
            legs_time.append(float(leg.cost))

        return jsonify({
            "solved": True,
            "positions": [[x, y] for (x, y) in path],
            "total_time": float(sum(legs_time)),
            "legs_time": legs_time,
            "barrier_count": maze.barrier_count,
        })

    return app


app = create_app()


if __name__ == "__main__":
    setup_logging()
    app.run(host="0.0.0.0", port=8081, threaded=True)
