"""Print a long‑lived access token for a user id.

Usage:
    python create_token.py 5
"""
import sys

from chukgo_api.app.core.security import create_user_token

if len(sys.argv) != 2 or not sys.argv[1].isdigit():
    sys.exit("usage: python create_token.py <user_id>")
# 365 days, in seconds
token = create_user_token(int(sys.argv[1]), expires_delta=365 * 24 * 60 * 60)
print(token)
