# awg_warp_service/server.py
import logging
from collections.abc import Callable
from typing import cast

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import MethodNotAllowed

from .common.config import Settings
from .common.exceptions import CaptchaRejectedError, ValidationError
from .services.auth import is_password_accepted
from .services.generator import Awg15Service
from .services.turnstile import TurnstileVerifier

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def _error(message: str, status: int) -> tuple[Response, int]:
    return jsonify(success=False, message=message), status


def _json_body() -> dict[str, object]:
    """Returns the JSON object body, an empty dict when there is no body."""
    body = cast(object, request.get_json(silent=True))
    if body is None:
        if request.get_data(cache=True):
            raise ValidationError("Request body must be valid JSON")
        return {}
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return cast(dict[str, object], body)


def _optional_str(body: dict[str, object], field: str) -> str | None:
    value = body.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"'{field}' must be a string")
    return value or None


def create_app(
    settings: Settings | None = None,
    service_factory: Callable[[], Awg15Service] = Awg15Service,
    verifier_factory: Callable[[str], TurnstileVerifier] = TurnstileVerifier,
) -> Flask:
    """Builds the Flask app. Collaborator factories can be swapped in tests."""
    settings = settings or Settings.from_env()
    app = Flask(__name__)

    if settings.passwords is None:
        logging.warning("PASSWORDS is not set; /auth accepts any password.")
    if not settings.turnstile_secret_key:
        logging.warning("TURNSTILE_SECRET_KEY is not set; CAPTCHA verification is skipped.")

    @app.after_request
    def add_cors_headers(response: Response) -> Response:
        if request.path == "/generate":
            response.headers.update(CORS_HEADERS)
        return response

    @app.errorhandler(MethodNotAllowed)
    def method_not_allowed(_e: MethodNotAllowed) -> tuple[Response, int]:
        logging.warning(f"Rejected {request.method} {request.path}: method not allowed.")
        return _error("Method not allowed", 405)

    @app.route("/generate", methods=["POST", "OPTIONS"])
    def generate() -> Response | tuple[Response, int]:
        if request.method == "OPTIONS":
            return Response(status=200)

        try:
            body = _json_body()
            endpoint = _optional_str(body, "endpoint")
            captcha_token = _optional_str(body, "captchaToken")

            if settings.turnstile_secret_key:
                verifier = verifier_factory(settings.turnstile_secret_key)
                try:
                    verifier.require(captcha_token, request.remote_addr)
                finally:
                    verifier.close()

            rendered = service_factory().generate_config(endpoint)
        except ValidationError as e:
            logging.warning(f"Invalid /generate request: {e}")
            return _error(str(e), 400)
        except CaptchaRejectedError as e:
            logging.warning(f"/generate refused: {e}")
            return _error(str(e), 403)
        except Exception as e:
            logging.exception(f"Failed to generate AWG configuration: {e}")
            return _error(f"Error: {e}", 500)

        return jsonify(success=True, config=rendered.text, configName=rendered.file_name)

    @app.route("/auth", methods=["POST"], provide_automatic_options=False)
    def auth() -> Response | tuple[Response, int]:
        try:
            body = _json_body()
            password = body.get("password")
            if not password or not isinstance(password, str):
                raise ValidationError("Password is required")

            if not is_password_accepted(password, settings.passwords):
                logging.warning("Rejected /auth attempt with an invalid password.")
                return _error("Invalid password", 401)
        except ValidationError as e:
            logging.warning(f"Invalid /auth request: {e}")
            return _error(str(e), 400)
        except Exception as e:
            logging.exception(f"Auth error: {e}")
            return _error("Internal server error", 500)

        return jsonify(success=True)

    return app
