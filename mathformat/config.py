import os
from pathlib import Path

LOG_LEVEL = os.environ.get("MATHFORMAT_LOG_LEVEL", "INFO").upper()

EXPORT_DIR = Path(os.environ.get("MATHFORMAT_EXPORT_DIR", "."))
DEFAULT_EXPORT_FILENAME = "math-expression.docx"
DEFAULT_PREVIEW_FILENAME = "math-expression.html"

MATHJAX_URL = os.environ.get(
    "MATHFORMAT_MATHJAX_URL",
    "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js",
)

HOST = os.environ.get("MATHFORMAT_HOST", "127.0.0.1")
PORT = int(os.environ.get("MATHFORMAT_PORT", "8000"))
