import sys

from forex_arbitrage.cli import main

sys.exit(main())
