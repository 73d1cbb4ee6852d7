"""Module entry point for running the Hostinger survey Flask application.

This module builds the Flask application and runs it when executed as a script.

Example:
    To start the application, run:

        poetry run python main.py

"""

import logging
import os

from hostinger_survey import create_app

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = create_app()

if __name__ == "__main__":
    # Run the Flask app directly when the script is executed
    app.run(host="0.0.0.0", port=8000)  # noqa: S104
