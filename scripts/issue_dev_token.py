"""
Issue a signed bearer token for a principal, for local development against
the API without the external identity provider.
Run: python -m scripts.issue_dev_token <principal_id> [--minutes 60]
"""
import argparse
import logging
import sys
import os
from datetime import timedelta

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.security import create_access_token

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Issue a development bearer token")
    parser.add_argument("principal_id", help="Value for the token's sub claim")
    parser.add_argument("--minutes", type=int, default=60, help="Token lifetime in minutes")
    args = parser.parse_args(argv)

    token = create_access_token({"sub": args.principal_id}, timedelta(minutes=args.minutes))
    logger.info(f"Issued token for principal={args.principal_id}, minutes={args.minutes}")
    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
