"""Run the CLAIMSO services API with uvicorn."""

from __future__ import annotations

import uvicorn

from claimso.config import API_HOST, API_PORT, DEBUG


def main() -> None:
    uvicorn.run("claimso.api.app:app", host=API_HOST, port=API_PORT, reload=DEBUG)


if __name__ == "__main__":
    main()
