"""One-time YouTube authorization setup.

Prerequisites:
    1. Enable "YouTube Data API v3" in a Google Cloud project
    2. Create OAuth 2.0 credentials (Web application) and add
       YOUTUBE_REDIRECT_URI to the authorized redirect URIs
    3. Set YOUTUBE_CLIENT_ID and YOUTUBE_CLIENT_SECRET in env.local

Usage:
    python -m app.scripts.youtube_auth

Prints the consent URL, reads the pasted authorization code and prints the
refresh token line to add to env.local. Always exits 0; failures are logged.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

from app.services.integrations.youtube_service import YouTubeService
from app.shared.api.utils import init_logger


def run(
    service: YouTubeService | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        service = service or YouTubeService()
        print("YouTube API Setup\n", file=stdout)
        print("Step 1: Visit this URL to authorize the application:\n", file=stdout)
        print(service.get_authorization_url(), file=stdout)
        print(
            "\nStep 2: After authorizing, paste the authorization code here: ",
            end="",
            file=stdout,
        )
        stdout.flush()

        code = stdin.readline().strip()
        if not code:
            logger.error("No authorization code provided")
            return 0

        print("\nExchanging code for tokens...\n", file=stdout)
        tokens = service.exchange_code_for_tokens(code)
        if not tokens.refresh_token:
            logger.error("Token exchange returned no refresh token; revoke access and retry")
            return 0

        print("Success! Add this to your env.local file:\n", file=stdout)
        print(f"YOUTUBE_REFRESH_TOKEN={tokens.refresh_token}\n", file=stdout)
    except Exception as e:
        logger.exception(f"YouTube setup failed: {e}")

    return 0


def main() -> None:
    init_logger()
    sys.exit(run())


if __name__ == "__main__":
    main()
