"""Mint a bearer token for the Code Camp API.

The token is signed with the key from the current settings and carries
the ``SuperUser`` claim, so it passes the default authorization policy.

Usage:
    python create_token.py --sub admin@example.com --days 365
"""
import argparse

from code_camp_api.app.core.config import Settings
from code_camp_api.app.core.security import SUPERUSER_CLAIM, create_access_token


def main() -> None:
    ap = argparse.ArgumentParser(description="Create a Code Camp API access token.")
    ap.add_argument("--sub", default="admin@example.com", help="Subject (user name or e-mail)")
    ap.add_argument("--days", type=int, default=365, help="Token lifetime in days")
    ap.add_argument("--no-superuser", action="store_true", help="Omit the SuperUser claim")
    args = ap.parse_args()

    claims = {"sub": args.sub}
    if not args.no_superuser:
        claims[SUPERUSER_CLAIM] = "True"
    print(create_access_token(Settings.load(), claims, expires_delta=args.days * 24 * 60 * 60))


if __name__ == "__main__":
    main()
