# serve.py
"""
Thin runner around the app factory.
"""
import logging

from progress_api import create_app

app = create_app()

if __name__ == "__main__":
    logging.basicConfig(level=app.config["LOG_LEVEL"])
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=False, threaded=True)
