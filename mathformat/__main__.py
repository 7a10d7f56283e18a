import sys

from mathformat.cli import main

sys.exit(main())
