import sys
from korean_pokedex.cli import main

if __name__ == "__main__":
    sys.exit(main())
