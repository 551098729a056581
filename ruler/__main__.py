import sys

from ruler.cli import main

sys.exit(main())
