"""
Run with: python -m keyvaluegrid
"""
import sys

from keyvaluegrid.main import main

if __name__ == "__main__":
    sys.exit(main())
