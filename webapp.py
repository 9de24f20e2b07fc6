#!/usr/bin/env python3
"""JSON API for analyzing hold'em hands over HTTP."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional, Set

from flask import Flask, jsonify, request
from werkzeug.exceptions import RequestEntityTooLarge

from analysis import analyze
from models import HandValidationError
from parser import HandParser

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONTENT_LENGTH = 1024 * 1024


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return str(raw).strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return int(default)
    try:
        return int(str(raw).strip())
    except ValueError:
        return int(default)


def _split_csv(value: str) -> Set[str]:
    return {part.strip().lower() for part in str(value or "").split(",") if part.strip()}


def _api_error(message: str, status: int = 400):
    return jsonify({"error": str(message)}), int(status)


@dataclass(frozen=True)
class RuntimeConfig:
    env: str
    host: str
    port: int
    debug: bool
    max_content_length: int
    allowed_hosts: Set[str]


def load_runtime_config() -> RuntimeConfig:
    env = str(os.getenv("ANALYZER_ENV", "development")).strip().lower()
    return RuntimeConfig(
        env=env,
        host=str(os.getenv("ANALYZER_HOST", "127.0.0.1")).strip(),
        port=_env_int("ANALYZER_PORT", 8788),
        debug=_env_bool("ANALYZER_DEBUG", env != "production"),
        max_content_length=max(1024, _env_int("ANALYZER_MAX_CONTENT_LENGTH", DEFAULT_MAX_CONTENT_LENGTH)),
        allowed_hosts=_split_csv(os.getenv("ANALYZER_ALLOWED_HOSTS", "")),
    )


def create_app(runtime: Optional[RuntimeConfig] = None) -> Flask:
    runtime = runtime or load_runtime_config()

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = runtime.max_content_length
    app.json.sort_keys = False

    @app.before_request
    def _before_request():
        host = str(request.headers.get("X-Forwarded-Host") or request.host).split(",")[0].strip().lower()
        host_no_port = host.split(":")[0]
        if runtime.allowed_hosts and host_no_port not in runtime.allowed_hosts:
            return _api_error("Host is not allowed", status=400)
        return None

    @app.after_request
    def _after_request(resp):
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        return resp

    @app.get("/api/health")
    @app.get("/healthz")
    def health():
        return jsonify({"ok": True})

    @app.post("/api/analyze")
    def api_analyze():
        payload = request.get_json(silent=True)
        if payload is None:
            return _api_error("Request body must be JSON", status=400)

        try:
            if isinstance(payload, list) or (isinstance(payload, dict) and "hands" in payload):
                raw_hands = payload if isinstance(payload, list) else payload["hands"]
                if not isinstance(raw_hands, list):
                    return _api_error("'hands' must be a list", status=400)
                parser = HandParser()
                reports = [analyze(parser.parse_hand(raw)).to_dict() for raw in raw_hands]
                return jsonify({"reports": reports})
            if not isinstance(payload, dict):
                return _api_error("Expected a hand object or a list of hands", status=400)
            return jsonify(analyze(payload).to_dict())
        except HandValidationError as exc:
            logger.info(f"Rejected hand: {exc}")
            return _api_error(str(exc), status=400)

    @app.errorhandler(RequestEntityTooLarge)
    def too_large(_err):
        return _api_error("Request body too large", status=413)

    @app.errorhandler(404)
    def not_found(_err):
        return _api_error("Not found", status=404)

    @app.errorhandler(405)
    def method_not_allowed(_err):
        return _api_error("Method not allowed", status=405)

    return app


def main() -> None:
    runtime = load_runtime_config()
    logging.basicConfig(level=logging.DEBUG if runtime.debug else logging.INFO)
    app = create_app(runtime)
    app.run(host=runtime.host, port=runtime.port, debug=runtime.debug)


if __name__ == "__main__":
    main()
