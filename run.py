#!/usr/bin/env python3
import sys
import os

# Add project root to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from stock_aggregator.main import main

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
