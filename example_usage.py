#!/usr/bin/env python3
"""
Basic usage examples for the Bittrex client library.

Public calls need no credentials. Private calls read the API key and secret
from the command line.

    python example_usage.py [API_KEY API_SECRET]
"""

import logging
import sys

from bittrex_client import BittrexClient, BittrexClientError, NotAuthenticatedError


def main():
    """Run basic usage examples."""

    print("=== Bittrex Client Basic Usage Examples ===\n")

    with BittrexClient(timeout=10) as client:
        # Example 1: public endpoint (no authentication)
        print("1. Listing markets...")
        try:
            markets = client.public_call("public/getmarkets")
            print(f"   ✓ {len(markets)} markets")
        except BittrexClientError as e:
            print(f"   ✗ getmarkets failed: {e}")
        print()

        # Example 2: public endpoint with parameters
        print("2. Fetching BTC-LTC ticker...")
        try:
            ticker = client.public_call("public/getticker", {"market": "BTC-LTC"})
            print(f"   ✓ Bid {ticker['Bid']} / Ask {ticker['Ask']}")
        except BittrexClientError as e:
            print(f"   ✗ getticker failed: {e}")
        print()

        # Example 3: private endpoints are refused before login
        print("3. Calling a private endpoint before login...")
        try:
            client.private_call("account/getbalances")
        except NotAuthenticatedError as e:
            print(f"   ✓ Refused: {e}")
        print()

        if len(sys.argv) != 3:
            print("Pass API_KEY API_SECRET to run the private examples.")
            return

        # Example 4: signed private call
        client.login(sys.argv[1], sys.argv[2])
        print("4. Fetching balances...")
        try:
            for balance in client.private_call("account/getbalances"):
                print(f"   {balance['Currency']}: {balance['Balance']}")
        except BittrexClientError as e:
            print(f"   ✗ getbalances failed: {e}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    main()
