# access_tokens/__main__.py

"""Run the API with uvicorn: `python -m access_tokens`."""

import os

import uvicorn


def run() -> None:
    uvicorn.run(
        "access_tokens.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        log_config=None,
    )


if __name__ == "__main__":
    run()
