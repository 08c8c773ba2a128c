"""Allow ``python -m tsinit``."""

from tsinit.pipeline import main

if __name__ == "__main__":
    main()
