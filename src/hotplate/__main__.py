import sys

from hotplate.main import main

if __name__ == "__main__":
    sys.exit(main())
