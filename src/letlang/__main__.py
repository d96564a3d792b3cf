import sys

from letlang.cli import main

sys.exit(main())
