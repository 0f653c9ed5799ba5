"""
Entry point to run the Question Simplifier relay with one command.

Usage:
    python main.py

Then, in a separate terminal:
    streamlit run ui_app.py
"""

import logging

import uvicorn

from question_simplifier.backend import app
from question_simplifier.config import settings


logging.basicConfig(level=logging.INFO)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
