import logging
import os

from flask import Flask
from flask_cors import CORS

from wp_downloader.core import config
from wp_downloader.routes.download_api import download_bp
from wp_downloader.routes.status_api import status_bp

logger = logging.getLogger(__name__)

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
STATIC_ROOT = os.path.join(BASE_DIR, "static")


def create_app() -> Flask:
    # Bundled client is served from the site root, like /js/app.js
    app = Flask(__name__, static_folder=STATIC_ROOT, static_url_path="")

    # Content-Disposition must be readable by cross-origin fetch() callers
    CORS(app, expose_headers=["Content-Disposition"])

    # Register blueprints
    app.register_blueprint(download_bp)
    app.register_blueprint(status_bp)

    @app.get("/")
    def index():
        return app.send_static_file("index.html")

    return app


app = create_app()


def main():
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger.info("=" * 34)
    logger.info(f"Server running on port {config.PORT}")
    logger.info(f"Local: http://localhost:{config.PORT}")
    logger.info("=" * 34)

    app.run(host=config.HOST, port=config.PORT, threaded=True)


if __name__ == "__main__":
    main()
