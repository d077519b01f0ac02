"""WSGI entry-point for the Travel Journal."""
from __future__ import annotations

from traveljournal import create_app

app = create_app()


if __name__ == "__main__":
    import os

    port = int(os.environ.get("PORT", 8080))
    app.run(host="0.0.0.0", port=port, debug=True)
