"""Entry point for the catacombs API."""

import uvicorn


def main():
    """Start the catacombs API server."""
    uvicorn.run("catacombs_api.api:app", host="127.0.0.1", port=8000, reload=False)


if __name__ == "__main__":
    main()
