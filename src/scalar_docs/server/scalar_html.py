import html

SCALAR_CDN_URL = "https://cdn.jsdelivr.net/npm/@scalar/api-reference"

TITLE = "Scalar API Reference"


def render_scalar_html(spec_url: str) -> str:
    """Render the docs page pointing the Scalar viewer at `spec_url`."""

    return f"""<!doctype html>
<html>
<head>
    <title>{TITLE}</title>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>
        body {{ margin: 0; }}
    </style>
</head>
<body>
    <script
        id="api-reference"
        data-url="{html.escape(spec_url, quote=True)}"></script>
    <script src="{SCALAR_CDN_URL}"></script>
</body>
</html>"""
