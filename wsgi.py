"""WSGI entrypoint.

Serve with any WSGI server (``gunicorn wsgi:app``) or run this module
directly for the development server.
"""

import logging

from task_service import create_app


app = create_app()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    host = app.config["HOST"]
    port = app.config["PORT"]
    logging.getLogger("task_service").info(f"starting HTTP server at http://{host}:{port}")

    app.run(host=host, port=port, threaded=True)
