from __future__ import annotations

import os
import sys

import requests

DEFAULT_SERVER = os.getenv("PASTEBIN_URL", "http://127.0.0.1:8080")


def submit(text: str, server: str = DEFAULT_SERVER) -> str:
    """Create a paste and return its absolute URL."""
    base = server.rstrip("/")
    resp = requests.post(f"{base}/submit", data={"content": text}, allow_redirects=False, timeout=10)
    if resp.status_code != 303:
        raise RuntimeError(f"paste rejected: HTTP {resp.status_code} {resp.text.strip()}")
    return base + resp.headers["Location"]


def main():
    # Usage: paste_cli.py [FILE]   (reads stdin when FILE is omitted)
    if len(sys.argv) > 1:
        with open(sys.argv[1], encoding="utf-8") as fh:
            text = fh.read()
    else:
        text = sys.stdin.read()

    try:
        print(submit(text))
    except (requests.RequestException, RuntimeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
