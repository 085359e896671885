#!/usr/bin/env python3
from .hash import main

if __name__ == '__main__':
    main()
