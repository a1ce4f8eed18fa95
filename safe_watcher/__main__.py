import sys

from safe_watcher.cli import main

sys.exit(main())
