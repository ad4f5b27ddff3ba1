import sys

from doc_analysis.application.cli import main

if __name__ == "__main__":
    sys.exit(main())
