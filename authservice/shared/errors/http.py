# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from authservice.shared.config import load_config
from authservice.shared.logging import logger

from .base import AppError, StorageError


def handle_app_error(error: AppError, *, debug_mode: bool = False) -> tuple[Response, HTTPStatus]:
    payload = error.to_dict()
    if isinstance(error, StorageError) and debug_mode and error.detail:
        payload.setdefault("context", {})["detail"] = error.detail
    return jsonify(payload), error.status


def register_error_handler(
    app: Flask, *, default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
) -> None:
    config = load_config()
    debug_mode = config.debug_logging

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if isinstance(exc, StorageError):
            logger.error(
                f"Storage failure during {dict(exc.context or {}).get('operation')} "
                f"on {request.method} {request.path}: {exc.detail}"
            )
        else:
            logger.warning(f"Handled application error {exc.code} on {request.method} {request.path}")
        return handle_app_error(exc, debug_mode=debug_mode)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return exc

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"body_size={len(request.data)}"
            )
        else:
            logger.error(f"Error: {type(exc).__name__} on {request.method} {request.path}")

        response = jsonify({"error": "internal_error"})
        return response, default_status
