import sys

from gl_mr.cli import main

sys.exit(main())
