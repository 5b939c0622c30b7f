"""Production entry point: ``uvicorn newsroom.application.api.rest.main:app``."""

import logfire
import uvicorn

# Logfire must be configured before the app is created and instrumented
logfire.configure(send_to_logfire="if-token-present", service_name="newsroom")

from newsroom.application.api.rest.app import create_app  # noqa: E402

app = create_app()


def run() -> None:
    """Console script: serve the API with uvicorn."""
    uvicorn.run(app, host="0.0.0.0", port=8000)
