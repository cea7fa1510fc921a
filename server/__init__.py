from flask import Flask, jsonify
from flask_cors import CORS

from .config.settings import load_config
from .controllers.api_controller import api_blueprint


def _method_not_allowed(_error):
    return jsonify({"error": "Method Not Allowed"}), 405


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(load_config(config_name))
    # Relay upstream bodies with their original key order.
    app.json.sort_keys = False

    app.register_blueprint(api_blueprint, url_prefix="/api")
    app.register_error_handler(405, _method_not_allowed)

    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    return app
