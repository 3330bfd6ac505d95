#!/usr/bin/env python3
from gitinfo.runner import main


if __name__ == "__main__":
    main()
