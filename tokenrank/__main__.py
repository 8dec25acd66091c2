import sys

from tokenrank.cli import main

sys.exit(main())
