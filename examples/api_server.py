"""
Example: API Server

Demonstrates running the FastAPI server for URL decomposition.

Start the server and query it:
```bash
# Start the server
uv run python examples/api_server.py

# In another terminal, query the API:
curl "http://localhost:8000/v1/parse?url=https://www.example.co.uk/search?q=1"
curl "http://localhost:8000/v1/parse?url=example.com&resolve=true"
```
"""

import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


def main():
    """Run the API server."""
    import uvicorn

    from domainer.api.server import app

    print("=" * 80)
    print("Starting Domainer API Server")
    print("=" * 80)
    print()
    print("The server will start on http://0.0.0.0:8000")
    print()
    print("API Endpoints:")
    print("  GET /                              - Health check")
    print("  GET /v1/parse?url=...&resolve=...  - Decompose a URL")
    print()
    print("Example queries:")
    print('  curl http://localhost:8000/')
    print('  curl "http://localhost:8000/v1/parse?url=user@example.com:80"')
    print('  curl "http://localhost:8000/v1/parse?url=example.com&resolve=true"')
    print()
    print("=" * 80)
    print()

    # Run server
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")


if __name__ == "__main__":
    main()
