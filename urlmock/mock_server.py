"""
urlmock/mock_server.py
======================
Flask echo server used as the mock target for redirected traffic during local runs.
Every request is answered with a JSON description of what was received.

    python -m urlmock.mock_server
"""
import logging

from flask import Flask, jsonify, request

from urlmock.config import config

logger = logging.getLogger(__name__)

app = Flask(__name__)

_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "OPTIONS", "DELETE"]


@app.get("/health")
def health():
    return jsonify({"status": "ok"}), 200


@app.route("/", defaults={"path": ""}, methods=_METHODS)
@app.route("/<path:path>", methods=_METHODS)
def echo(path):
    body = request.get_data(as_text=True)
    logger.info("Mock hit — %s /%s (%d byte body)", request.method, path, len(body))

    return jsonify({
        "method": request.method,
        "path": f"/{path}",
        "args": request.args.to_dict(),
        "body": body,
    })


if __name__ == "__main__":  # pragma: no cover
    print(f"MOCK SERVER LISTENING ON PORT {config.MOCK_SERVER_PORT}")
    app.run(host="0.0.0.0", port=config.MOCK_SERVER_PORT, debug=True)
