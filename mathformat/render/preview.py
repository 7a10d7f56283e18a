from __future__ import annotations

import html
import json
import re
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

from mathformat import config
from mathformat.converter import ConversionResult

_PLACEHOLDER_RE = re.compile(r"__([A-Z_]+)__")

_HTML_TEMPLATE = r"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Math Expression Formatter</title>

    <!-- MATHJAX INTEGRATION -->
    <script>
      window.MathJax = {
        loader: { load: ['[tex]/html'] },
        tex: {
          packages: {'[+]': ['html']},
          inlineMath: [['$', '$']],
          displayMath: [['$$', '$$']]
        },
        options: {
          skipHtmlTags: ['script', 'noscript', 'style', 'textarea', 'pre', 'code']
        }
      };
    </script>
    <script id="MathJax-script" async src="__MATHJAX_URL__"></script>

    <style>
        body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; margin: 0; padding: 20px; background: #f3f4f6; color: #1f2937; transition: background-color 0.3s, color 0.3s; }
        body.dark { background: #111827; color: #f9fafb; }
        .container { max-width: 56rem; margin: 0 auto; }
        header { display: flex; justify-content: space-between; align-items: center; }
        .card { background: white; padding: 16px; border-radius: 8px; box-shadow: 0 2px 4px rgba(0,0,0,0.1); margin-bottom: 20px; }
        body.dark .card { background: #1f2937; }
        .preview { padding: 16px; border-radius: 4px; background: #f3f4f6; overflow-x: auto; }
        body.dark .preview { background: #374151; }
        pre { padding: 12px; border-radius: 4px; background: #f3f4f6; overflow-x: auto; font-size: 14px; white-space: pre-wrap; }
        body.dark pre { background: #374151; color: #e5e7eb; }
        .grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(20rem, 1fr)); gap: 16px; }
        .row { display: flex; justify-content: space-between; align-items: center; }
        button { padding: 4px 12px; border: none; border-radius: 4px; cursor: pointer; font-size: 14px; background: #3b82f6; color: white; }
        button:hover { background: #2563eb; }
        #theme-toggle { background: #e5e7eb; color: #1f2937; border-radius: 9999px; }
        body.dark #theme-toggle { background: #374151; color: #f9fafb; }
        .empty { color: #6b7280; font-style: italic; }
        footer { margin-top: 48px; text-align: center; font-size: 14px; color: #6b7280; }
    </style>
</head>
<body class="__BODY_CLASS__">
<div class="container">
    <header>
        <h1>Math Expression Formatter</h1>
        <button id="theme-toggle" type="button" title="Toggle dark mode">&#9681;</button>
    </header>

    <div class="card">
        <h2>Input Expression:</h2>
        <pre id="input-source">__INPUT_HTML__</pre>
    </div>

    <div class="card">
        <h2>Preview:</h2>
        <div class="preview">__PREVIEW_HTML__</div>
    </div>

    <div class="grid">
        <div class="card">
            <div class="row">
                <h2>LaTeX Format:</h2>
                <button type="button" data-copy="latex">Copy LaTeX</button>
            </div>
            <pre id="latex-source">__LATEX_HTML__</pre>
        </div>
        <div class="card">
            <div class="row">
                <h2>MathML Format:</h2>
                <button type="button" data-copy="mathml">Copy MathML</button>
            </div>
            <pre id="mathml-source">__MATHML_HTML__</pre>
        </div>
    </div>

    <footer>Math Expression Formatter</footer>
</div>

<script>
    const outputs = __OUTPUTS_JSON__;

    document.getElementById('theme-toggle').addEventListener('click', () => {
        document.body.classList.toggle('dark');
    });

    document.querySelectorAll('button[data-copy]').forEach((btn) => {
        const label = btn.textContent;
        btn.addEventListener('click', () => {
            navigator.clipboard.writeText(outputs[btn.dataset.copy] || '').then(() => {
                btn.textContent = 'Copied!';
                setTimeout(() => { btn.textContent = label; }, 2000);
            });
        });
    });
</script>
</body>
</html>
"""


def _script_json(data: Dict[str, str]) -> str:
    # "</" would close the surrounding <script> element.
    return json.dumps(data, ensure_ascii=False).replace("</", "<\\/")


def render_preview_html(
    result: ConversionResult,
    *,
    dark: bool = False,
    mathjax_url: Optional[str] = None,
) -> str:
    """Build a standalone HTML page previewing ``result`` with MathJax."""
    if result.is_empty:
        preview = '<span class="empty">Nothing to preview.</span>'
    else:
        preview = "$" + html.escape(result.latex) + "$"

    values = {
        "MATHJAX_URL": html.escape(mathjax_url or config.MATHJAX_URL),
        "BODY_CLASS": "dark" if dark else "",
        "INPUT_HTML": html.escape(result.input),
        "PREVIEW_HTML": preview,
        "LATEX_HTML": html.escape(result.latex),
        "MATHML_HTML": html.escape(result.mathml),
        "OUTPUTS_JSON": _script_json({"latex": result.latex, "mathml": result.mathml}),
    }
    # Single pass, so placeholder-like text inside user values stays literal.
    return _PLACEHOLDER_RE.sub(
        lambda m: values.get(m.group(1), m.group(0)), _HTML_TEMPLATE
    )


def write_preview(
    result: ConversionResult,
    output_path: Optional[Path] = None,
    *,
    dark: bool = False,
) -> Path:
    output_path = Path(output_path or config.EXPORT_DIR / config.DEFAULT_PREVIEW_FILENAME)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_preview_html(result, dark=dark), encoding="utf-8")
    logger.success(f"Preview saved to {output_path}")
    return output_path
