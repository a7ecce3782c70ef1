"""Run the development server: ``python -m tasktracker``."""

import logging
import sys

from tasktracker import create_app


def main() -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.INFO,
        format="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    app = create_app()
    logging.getLogger("tasktracker").info(
        f"{app.config['APP_NAME']} starting on port {app.config['PORT']}"
    )
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])


if __name__ == "__main__":
    main()
