import sys

from looseorder.cmd.command import main

sys.exit(main())
